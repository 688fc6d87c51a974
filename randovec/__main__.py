"""Run the seeder: ``python -m randovec``."""

from randovec.main import main

if __name__ == "__main__":
    main()
