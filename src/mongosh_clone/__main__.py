"""mongosh-clone CLI bootstrap."""

from mongosh_clone.cli import app

if __name__ == "__main__":
    app()
