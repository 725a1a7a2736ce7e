"""Entry point for python -m care_ai_core"""

from care_ai_core.runner import main

if __name__ == "__main__":
    main()
