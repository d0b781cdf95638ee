"""Allow ``python -m pochade``."""
from pochade.cli import app

if __name__ == "__main__":
    app()
