"""Terminal client for the daily draw."""
import logging

import click

from symbol_quest.client.errors import ApiError, DrawValidationError
from symbol_quest.client.local_ledger import LocalDrawLedger
from symbol_quest.client.orchestrator import DrawOrchestrator
from symbol_quest.client.session import ClientConfig, ClientSession
from symbol_quest.client.storage import JsonFileStorage
from symbol_quest.models.card import UserContext
from symbol_quest.models.enums import DrawStatus, Mood
from symbol_quest.repositories.card_catalog import get_catalog
from symbol_quest.services.card_selector import CardSelector


def build_orchestrator(config: ClientConfig) -> DrawOrchestrator:
    storage = JsonFileStorage(config.home)
    session = ClientSession.from_config(config, storage)
    selector = CardSelector(get_catalog())
    return DrawOrchestrator(LocalDrawLedger(storage), selector, session=session)


def _echo_card(card, interpretation=None):
    click.echo(f"{card.number} {card.name}".strip())
    if card.keywords:
        click.echo(f"  Keywords: {', '.join(card.keywords)}")
    meaning = interpretation or card.traditional_meaning
    if meaning:
        click.echo(f"  {meaning}")


@click.group("symbol-quest")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, verbose):
    """Draw one card per day for your mood and question."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    if "orchestrator" not in ctx.obj:
        ctx.obj["orchestrator"] = build_orchestrator(ClientConfig.from_env())


@cli.command("draw")
@click.option(
    "--mood",
    "-m",
    type=click.Choice(Mood.values(), case_sensitive=False),
    prompt="How are you feeling?",
    help="Current mood",
)
@click.option("--question", "-q", prompt="What is your question?", help="Question for today")
@click.pass_obj
def draw_command(obj, mood, question):
    """
    Draw today's card.

    Usage:
        symbol-quest draw --mood hopeful --question "What should I focus on?"
    """
    orchestrator = obj["orchestrator"]
    try:
        outcome = orchestrator.perform_draw(UserContext(mood=mood.lower(), question=question))
    except DrawValidationError as e:
        raise click.BadParameter(str(e))

    if outcome.status == DrawStatus.QUOTA_EXCEEDED:
        click.echo(outcome.message)
        if outcome.upgrade_required:
            click.echo("Upgrade to premium for more draws.")
        return

    if outcome.status == DrawStatus.ALREADY_DRAWN:
        click.echo(outcome.message)
    if outcome.card is not None:
        _echo_card(outcome.card)


@cli.command("today")
@click.pass_obj
def today_command(obj):
    """Show today's card if one was drawn."""
    card = obj["orchestrator"].todays_card()
    if card is None:
        click.echo("No card drawn today.")
        return
    _echo_card(card)


@cli.command("history")
@click.option("--limit", "-n", default=10, show_default=True, help="Entries to show")
@click.pass_obj
def history_command(obj, limit):
    """List past draws, newest first."""
    records = obj["orchestrator"].history()[:limit]
    if not records:
        click.echo("No draws yet.")
        return
    for record in records:
        mood = record.context.mood if record.context else "-"
        click.echo(f"{record.date}  {record.card.name}  ({mood})")


@cli.command("interpret")
@click.pass_obj
def interpret_command(obj):
    """Request a premium interpretation of the latest draw."""
    orchestrator = obj["orchestrator"]
    history = orchestrator.history()
    if not history:
        click.echo("No draws yet.")
        return

    try:
        text = orchestrator.request_enhanced_interpretation(history[0])
    except ApiError as e:
        raise click.ClickException(e.message)
    _echo_card(history[0].card, text)


@cli.command("login")
@click.option("--email", prompt=True)
@click.option("--password", prompt=True, hide_input=True)
@click.pass_obj
def login_command(obj, email, password):
    """Sign in to the draw service."""
    session = obj["orchestrator"].session
    try:
        result = session.login(email, password)
    except ApiError as e:
        raise click.ClickException(e.message)
    click.echo(f"Signed in as {result.email} ({result.subscription_tier})")


@cli.command("register")
@click.option("--email", prompt=True)
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.pass_obj
def register_command(obj, email, password):
    """Create an account on the draw service."""
    session = obj["orchestrator"].session
    try:
        result = session.register(email, password)
    except ApiError as e:
        raise click.ClickException(e.message)
    click.echo(f"Registered {result.email}")


@cli.command("logout")
@click.pass_obj
def logout_command(obj):
    """Sign out; draws continue locally."""
    obj["orchestrator"].session.logout()
    click.echo("Signed out.")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
