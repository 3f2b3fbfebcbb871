"""Management script for Flask application."""
import json
import os
from dotenv import load_dotenv

# Load environment variables FIRST, before any app imports
load_dotenv(dotenv_path=os.path.join(os.path.dirname(os.path.abspath(__file__)), '.env'))

import click
from flask.cli import FlaskGroup
from adminui_api import create_app

# Create application
app = create_app(os.getenv("FLASK_ENV", "development"))

# Create Flask CLI group
cli = FlaskGroup(create_app=lambda: app)


@cli.command("envelope_preview")
@click.option("--failed", is_flag=True, help="Preview a failure envelope.")
@click.option("--message", default="Preview", help="Envelope message.")
def envelope_preview(failed, message):
    """Print the envelope the API would send with the current configuration.

    Usage:
        python manage.py envelope_preview
        python manage.py envelope_preview --failed --message "Not Found"
    """
    from adminui_api.utils.response import FailureOutcome, SuccessOutcome, get_formatter

    outcome = FailureOutcome(message=message) if failed else SuccessOutcome(message=message)

    with app.app_context():
        envelope, status_code = get_formatter().format(outcome)

    click.echo(f"HTTP {status_code}")
    click.echo(json.dumps(envelope, indent=2))


if __name__ == "__main__":
    cli()
