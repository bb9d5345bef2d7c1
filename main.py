import os
import sys
import time
import logging
from prompt_toolkit import prompt
from rich.console import Console
from rich.table import Table
from rich.prompt import Prompt, Confirm
from rich.panel import Panel
from blessed import Terminal
from authenticator import current_code, get_totp_uri, seconds_remaining
from qr_display import render_qr
from realitycheck.errors import RealityCheckError
from session import Session

# Should match the web app's service worker cache version
APP_VERSION = "v20"

LOG_LEVEL = os.environ.get("REALITYCHECK_LOG_LEVEL", "WARNING").upper()

# Initialize rich console
console = Console()
term = Terminal()


def animated_text(text, delay=0.02):
    for char in text:
        sys.stdout.write(term.green + char)
        sys.stdout.flush()
        time.sleep(delay)
    print(term.normal)


def banner():
    console.print(Panel(
        "Verify who you're talking to with a shared authenticator code.",
        title=f"[bold red]🔐 Reality Check {APP_VERSION}[/bold red]",
        style="bold cyan",
        expand=False
    ), justify="center")


def show_menu():
    table = Table(title="🔐 Reality Check Menu", header_style="bold magenta")
    table.add_column("Option", style="cyan", justify="center")
    table.add_column("Command", style="yellow")
    table.add_row("1", "Show My Key")
    table.add_row("2", "Scan Their Key")
    table.add_row("3", "How It Works")
    table.add_row("4", "Exit")

    console.print("\n")
    console.print(table, justify="center")


def show_instructions():
    console.print(Panel(
        "Reality Check verifies identities while communicating remotely. You and a contact "
        "exchange keys once (in person or video) to create a shared secret. Add it to your "
        "authenticator app, and you'll both see matching 6-digit codes. While talking or "
        "messaging in real-time, compare codes. If they match, you're talking to the real "
        "person. Protects against SIM swaps, deepfakes, and impersonation.",
        title="[bold cyan]How It Works[/bold cyan]",
        expand=False
    ))
    Prompt.ask("[cyan]Press Enter when done[/cyan]", default="", show_default=False)


def show_my_key(session):
    if not session.has_keypair:
        animated_text("🔑 Generating ephemeral key...")
    display = session.show_my_key()

    console.rule("[bold cyan]Your Key[/bold cyan]")
    console.print("Share this QR code with someone in person:")
    console.print(render_qr(display.envelope))
    console.print(f"[bold]Fingerprint (for verbal verification):[/bold] [yellow]{display.fingerprint}[/yellow]")
    console.print(f"[dim]{display.envelope}[/dim]")
    console.print("[cyan]Next step:[/cyan] choose \"Scan Their Key\" to scan their code.")


def pasted_payloads():
    """Scanner stand-in: yields each payload pasted at the prompt, stops on a blank line."""
    while True:
        text = prompt("Paste their QR payload (blank to cancel): ").strip()
        if not text:
            return
        yield text


def display_totp_result(totp_secret):
    console.rule("[bold green]✅ TOTP Secret Generated[/bold green]")
    console.print(
        "Next steps:\n"
        "  1. Open your authenticator app (Authy, Google Authenticator, etc.)\n"
        "  2. Add account manually (you can name it whatever you like)\n"
        "  3. Enter the secret when prompted"
    )
    if Confirm.ask("[yellow]Show secret text?[/yellow]", default=False):
        console.print(Panel(totp_secret, title="TOTP Secret", expand=False))
    if Confirm.ask("[yellow]Show as a QR code for your authenticator app?[/yellow]", default=False):
        name = Prompt.ask("[yellow]Account name[/yellow]", default="contact")
        console.print(render_qr(get_totp_uri(totp_secret, name)))

    now = int(time.time())
    console.print(
        f"Current code: [bold green]{current_code(totp_secret, now)}[/bold green] "
        f"(changes in {seconds_remaining(totp_secret, now)}s)"
    )
    console.print(
        "[dim]🔒 Once added to your authenticator app you don't need to keep this secret. "
        "Keys are ephemeral and discarded when you exit.[/dim]"
    )
    Prompt.ask("[cyan]Press Enter when done[/cyan]", default="", show_default=False)


def scan_their_key(session):
    if not session.has_keypair:
        animated_text("🔑 Generating your key...")
    totp_secret = session.scan(pasted_payloads())
    if totp_secret is None:
        console.print("[yellow]⚠️ Scan cancelled.[/yellow]")
        return
    display_totp_result(totp_secret)
    session.done()


# Main Interactive Loop
def main_cli():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")
    banner()
    session = Session()

    while True:
        show_menu()
        command = Prompt.ask("[bold cyan]Select an option[/bold cyan]", choices=["1", "2", "3", "4"])

        try:
            if command == "1":
                show_my_key(session)
            elif command == "2":
                scan_their_key(session)
            elif command == "3":
                show_instructions()
            elif command == "4":
                animated_text("🔒 Discarding keys... Goodbye!")
                break
        except RealityCheckError as e:
            console.print(f"[bold red]❌ Error: {e}[/bold red]")
        except (KeyboardInterrupt, EOFError):
            console.print("[yellow]⚠️ Cancelled.[/yellow]")
            session.done()


if __name__ == "__main__":
    main_cli()
