import json
import logging
import os
import sys
import time

import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.panel import Panel
from rich.prompt import Prompt

# Import Engine Components
from nighttrain.audio import SilentAudio, TerminalAudio
from nighttrain.campaign import CampaignError, load_campaign
from nighttrain.config import load_config, toggle_debug
from nighttrain.director import Director
from nighttrain.narrator import THEME, ConsoleNarrator
from nighttrain.state import GameState

QUIT_WORDS = ["quit", "exit", "menu"]

console = Console(theme=THEME)


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def setup_logging(debug):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def show_welcome_screen(config):
    clear_screen()

    welcome_md = Markdown("""
    # NIGHT TRAIN

    A locked compartment. A buzzing phone. A station that is on no map.

    > *Type what you do. The train listens.*
    """)

    console.print(Panel(
        welcome_md,
        border_style="info",
        padding=(1, 2),
        width=60
    ))

    console.print("\n[dim]Select an option:[/dim]\n")

    debug_state = "On" if config.get('debug_mode', False) else "Off"
    menu_options = [
        ("1", f"Start New Journey: {config.get('campaign')}"),
        ("D", f"Toggle Debug Mode (current: {debug_state})"),
        ("2", "Quit"),
    ]

    for key, label in menu_options:
        console.print(f" [[info]{key}[/info]] {label}")

    print()
    return Prompt.ask(" >", choices=["1", "2", "D", "d"], default="1", show_choices=False)


# ============================================
# GAME LOOP
# ============================================
def start_game(config):
    clear_screen()
    console.print(Panel("[info]BOARDING...[/info]", border_style="info"))

    # 1. LOAD CAMPAIGN DATA
    try:
        campaign = load_campaign(config.get('campaign', 'night_train'))
    except FileNotFoundError as e:
        console.print(Panel(f"[warning]ERROR: Campaign data not found.[/] Missing file: {e}", border_style="warning"))
        time.sleep(3)
        return
    except yaml.YAMLError as e:
        console.print(Panel(f"[warning]YAML STRUCTURE ERROR:[/]\nCheck your campaign files for indentation or syntax errors.\nDetails: {e}", border_style="warning"))
        time.sleep(5)
        return
    except CampaignError as e:
        console.print(Panel(f"[warning]CAMPAIGN ERROR:[/]\nThe campaign files do not describe a playable story.\nDetails: {e}", border_style="warning"))
        time.sleep(5)
        return

    # 2. FRESH RUN STATE (nothing survives a restart)
    session = GameState()
    narrator = ConsoleNarrator(console, text_speed=config.get('text_speed', 0.015))
    audio = TerminalAudio(console) if config.get('audio', False) else SilentAudio()
    director = Director(campaign, session, narrator, audio)

    clear_screen()
    console.print(Panel(
        f"[bold blue]{campaign['manifest'].get('title', 'Unknown Campaign')}[/bold blue]",
        title="JOURNEY STARTED",
        border_style="info"
    ))
    director.begin()
    console.print("[dim]Type 'quit' to return to menu.[/dim]\n")

    # 3. THE LOOP
    is_debug = config.get('debug_mode', False)
    while True:
        user_input = Prompt.ask("[info]>[/info]")

        if user_input.strip().lower() in QUIT_WORDS:
            break

        command = director.handle(user_input)

        if is_debug and command is not None:
            console.print(Panel(f"[dim]Intent ({user_input}):[/]\n{json.dumps(command, indent=2)}", title="[DEBUG: Listener Tool Output]", border_style="dim"))
            console.print(Panel(json.dumps(session.snapshot(), indent=2, ensure_ascii=False), title="[DEBUG: Game State]", border_style="dim"))


# ============================================
# MAIN
# ============================================
def main():
    config = load_config()
    setup_logging(config.get('debug_mode', False))

    while True:
        # Re-load config to get the latest debug state for the menu label
        config = load_config()
        choice = show_welcome_screen(config)

        if choice == "1":
            start_game(config)
        elif choice.upper() == "D":
            debug = toggle_debug(config)
            setup_logging(debug)
            clear_screen()
            console.print(Panel(
                f"[info]DEBUG MODE:[/][bold]{' ON' if debug else ' OFF'}[/bold]",
                border_style="info"
            ))
            time.sleep(1)
        elif choice == "2":
            console.print("\nGoodbye.")
            sys.exit()


def run():
    try:
        main()
    except (KeyboardInterrupt, EOFError):
        console.print("\nExiting.")


if __name__ == "__main__":
    run()
