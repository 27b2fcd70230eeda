"""
Run with: python -m shopmap
"""
from shopmap.main import main

if __name__ == "__main__":
    main()
