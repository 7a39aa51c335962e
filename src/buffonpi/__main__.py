"""Command-line interface."""
from buffonpi.main import main

if __name__ == "__main__":
    main()
