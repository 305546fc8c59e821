"""Run the API with ``python -m usuarios_api``."""

from usuarios_api.main import run

if __name__ == "__main__":
    run()
