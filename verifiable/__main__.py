"""Run the credential CLI: python -m verifiable --help"""

from verifiable.cli.main import app

if __name__ == "__main__":
    app(prog_name="verifiable")
