# blog_api/commands.py
import click
from flask import Flask

from blog_api.errors import BadRequestError
from blog_api.extensions import db
from blog_api.models.user import UserType


@click.command("init-db")
def init_db_command():
    """Crea todas las tablas que falten."""
    # Import local para que los modelos queden registrados en la metadata
    from blog_api import models  # noqa: F401

    db.create_all()
    click.echo("✅ Tablas creadas")


@click.command("create-user")
@click.option("--name", required=True)
@click.option("--email", required=True)
@click.option("--password", required=True, prompt=True, hide_input=True)
@click.option(
    "--type",
    "user_type",
    type=click.Choice([t.value for t in UserType]),
    default=UserType.BLOGGER.value,
    show_default=True,
)
def create_user_command(name, email, password, user_type):
    """Crea un usuario; es la forma de dar de alta el primer admin."""
    from blog_api.utils.accounts import create_user

    try:
        user = create_user(name=name, email=email, password=password, user_type=UserType(user_type))
    except BadRequestError as e:
        raise click.ClickException(e.reason)
    click.echo(f"✅ Usuario {user.name} creado (id={user.id}, type={user.type.value})")


def register_commands(app: Flask):
    app.cli.add_command(init_db_command)
    app.cli.add_command(create_user_command)
