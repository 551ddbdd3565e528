"""CLI interface for rulebot"""

import sys
import time
import argparse
import logging
from colorama import init, Fore, Style

from .clock import SystemClock
from .knowledge import KnowledgeBase, FAREWELL
from .responses import ResponseResolver, Match, EXACT
from . import config
from . import __version__, __author__, __powered_by__

# Initialize colorama for Windows support
init(autoreset=True)

logger = logging.getLogger(__name__)


# ── Typewriter helper ────────────────────────────────────────────────────────
def _typewrite(text: str, color: str = Fore.WHITE, delay: float = config.TYPEWRITER_DELAY, end: str = '\n'):
    """Print text with a typewriter effect, one character at a time."""
    if delay <= 0:
        sys.stdout.write(f"{color}{text}{Style.RESET_ALL}{end}")
        sys.stdout.flush()
        return
    # Auto-reduce speed for long texts so it never feels sluggish
    if len(text) > 200:
        delay = min(delay, 0.009)
    sys.stdout.write(color)
    sys.stdout.flush()
    for ch in text:
        sys.stdout.write(ch)
        sys.stdout.flush()
        time.sleep(delay)
    sys.stdout.write(Style.RESET_ALL + end)
    sys.stdout.flush()


class RulebotCLI:
    """Interactive chat window for the terminal"""

    def __init__(self, resolver: ResponseResolver = None, delay: float = config.TYPEWRITER_DELAY):
        self.resolver = resolver
        self.delay = delay
        self.running = False

    def print_banner(self):
        """Print welcome banner with a subtle cascade-reveal effect."""
        W = config.CLI_WIDTH

        def _row(label: str, value: str, vcol: str) -> str:
            inner = f"  {Fore.WHITE}{label}{vcol}{value}"
            pad   = W - 2 - len(label) - len(value)
            return f"{Fore.MAGENTA}║{inner}{' ' * max(pad, 0)}{Fore.MAGENTA}║{Style.RESET_ALL}"

        lines = [
            "",
            f"{Fore.MAGENTA}╔{'═' * W}╗{Style.RESET_ALL}",
            f"{Fore.MAGENTA}║{Fore.CYAN + Style.BRIGHT}{config.APP_TITLE:^{W}}{Style.RESET_ALL}{Fore.MAGENTA}║{Style.RESET_ALL}",
            f"{Fore.MAGENTA}║{'─' * W}║{Style.RESET_ALL}",
            _row("Developed by  : ", __author__,     Fore.GREEN),
            _row("Powered by    : ", __powered_by__, Fore.CYAN),
            _row("Version       : ", f"v{__version__}", Fore.WHITE),
            f"{Fore.MAGENTA}╚{'═' * W}╝{Style.RESET_ALL}",
            "",
        ]

        for line in lines:
            print(line)
            if self.delay > 0:
                time.sleep(0.030)   # subtle cascade reveal

    def print_help(self):
        bar = f"{Fore.CYAN}{'─' * 60}{Style.RESET_ALL}"
        print(f"\n{bar}")
        print(f"{Fore.CYAN + Style.BRIGHT}  Commands{Style.RESET_ALL}")
        print(bar)

        for cmd, desc in [
            ("help",    "Show this help message"),
            ("stats",   "Show knowledge base statistics"),
            ("version", "Show version and credits"),
            ("quit",    "Leave the chat"),
        ]:
            print(f"  {Fore.GREEN}{cmd:<10}{Style.RESET_ALL}{Fore.WHITE}{desc}{Style.RESET_ALL}")

        print(f"\n{Fore.CYAN + Style.BRIGHT}  Try{Style.RESET_ALL}")
        for ex in ["hello", "what is your name", "time", "bye"]:
            print(f"  {Fore.YELLOW}›{Style.RESET_ALL} {ex}")
        print(f"{bar}\n")

    def print_response(self, text: str):
        """Print a bot reply with its sender label."""
        label = f"{Fore.GREEN + Style.BRIGHT}{config.BOT_LABEL}:{Style.RESET_ALL} "
        sys.stdout.write(label)
        _typewrite(text, Fore.WHITE, delay=self.delay)
        print()

    def print_stats(self):
        stats = self.resolver.knowledge_base.get_statistics()
        print(f"\n{Fore.CYAN + Style.BRIGHT}  Knowledge base{Style.RESET_ALL}")
        print(f"  {Fore.WHITE}Entries   : {stats['total_entries']}{Style.RESET_ALL}")
        for category, count in stats["by_category"].items():
            print(f"  {Fore.WHITE}{category:<10}: {count}{Style.RESET_ALL}")
        print(f"  {Fore.WHITE}Dynamic   : {', '.join(stats['dynamic_triggers']) or '-'}{Style.RESET_ALL}\n")

    def print_version(self):
        print()
        print(f"{Fore.CYAN + Style.BRIGHT}  rulebot v{__version__}{Style.RESET_ALL}")
        print(f"  {Fore.GREEN}Developer : {__author__}{Style.RESET_ALL}")
        print(f"  {Fore.CYAN}Powered by: {__powered_by__}{Style.RESET_ALL}")
        print()

    def print_error(self, error: str):
        """Print error message."""
        print(f"\n{Fore.RED}  ✗  {error}{Style.RESET_ALL}\n")

    def get_input(self) -> str:
        """Get user input with styled prompt."""
        try:
            prompt = (
                f"{Fore.LIGHTMAGENTA_EX + Style.BRIGHT}{config.USER_LABEL}{Style.RESET_ALL}"
                f"{Fore.LIGHTMAGENTA_EX} ›{Style.RESET_ALL} "
            )
            return input(prompt).strip()
        except (KeyboardInterrupt, EOFError):
            return "quit"

    def initialize_bot(self) -> bool:
        """Build the knowledge base (unless a resolver was injected) and greet."""
        try:
            if self.resolver is None:
                clock = SystemClock()
                self.resolver = ResponseResolver(KnowledgeBase.build(clock), clock)
        except Exception as e:
            self.print_error(f"Failed to initialize: {e}")
            logger.exception("Initialization error")
            return False

        self.print_response(config.GREETING)
        return True

    def handle_command(self, command: str):
        """
        Handle special commands.
        Returns True to continue, False to exit, None if not a command.
        """
        cmd = command.lower()

        if cmd in ('quit', 'q'):
            _typewrite("Goodbye!", Fore.MAGENTA, delay=self.delay)
            return False

        if cmd == 'help':
            self.print_help()
            return True

        if cmd == 'version':
            self.print_version()
            return True

        if cmd in ('stats', 'statistics'):
            self.print_stats()
            return True

        return None  # Not a command

    def respond(self, user_input: str) -> Match:
        """Resolve one message and print the reply."""
        match = self.resolver.match(user_input)
        self.print_response(match.response)
        return match

    def run(self):
        """Main chat loop."""
        self.print_banner()
        self.print_help()

        if not self.initialize_bot():
            return

        self.running = True

        while self.running:
            try:
                user_input = self.get_input()
                if not user_input:
                    continue

                result = self.handle_command(user_input)
                if result is False:
                    break
                if result is True:
                    continue

                match = self.respond(user_input)
                if match.stage == EXACT and match.entry.category == FAREWELL:
                    self.running = False

            except KeyboardInterrupt:
                print(f"\n{Fore.YELLOW}  Use 'quit' to exit.{Style.RESET_ALL}\n")
            except Exception as e:
                self.print_error(f"Unexpected error: {e}")
                logger.exception("Unexpected error in main loop")


def main(argv=None):
    """Main entry point — supports one-shot messages, --version, --about and interactive mode"""
    parser = argparse.ArgumentParser(
        prog="rulebot",
        description="rulebot — a small rule-based chatbot",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            f"Developed by: {__author__}\n"
            f"Powered by:   {__powered_by__}\n"
            f"Version:      {__version__}"
        ),
    )
    parser.add_argument(
        "message",
        nargs="*",
        help="Answer this message and exit instead of starting the chat",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"rulebot v{__version__}",
    )
    parser.add_argument(
        "--about",
        action="store_true",
        help="Show detailed about information and exit",
    )
    parser.add_argument(
        "--no-typewriter",
        action="store_true",
        help="Print replies instantly",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log which rule answered each message",
    )

    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s: %(message)s')
        logging.getLogger("rulebot").setLevel(logging.DEBUG)

    if args.about:
        print(f"{Fore.CYAN}rulebot{Style.RESET_ALL}")
        print(f"  Rule-based replies from a fixed knowledge base")
        print(f"  {Fore.GREEN}Version   : {__version__}{Style.RESET_ALL}")
        print(f"  {Fore.GREEN}Developer : {__author__}{Style.RESET_ALL}")
        print(f"  {Fore.BLUE}Powered by: {__powered_by__}{Style.RESET_ALL}")
        print(f"\n  Run {Fore.YELLOW}rulebot{Style.RESET_ALL} to start chatting.")
        return

    if args.message:
        text = " ".join(args.message)
        if not text.strip():
            parser.error("message must not be blank")
        clock = SystemClock()
        resolver = ResponseResolver(KnowledgeBase.build(clock), clock)
        print(resolver.resolve(text))
        return

    cli = RulebotCLI(delay=0 if args.no_typewriter else config.TYPEWRITER_DELAY)
    try:
        cli.run()
    except Exception as e:
        print(f"{Fore.RED}Fatal error: {e}{Style.RESET_ALL}")
        logging.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
