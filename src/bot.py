"""
Main bot class: engine + composer + transcript for one chat session.
"""

import argparse
import logging
import time
from typing import Dict, List, Optional

from rich.console import Console
from rich.markup import escape

from composer import BotMessage, ResponseComposer
from config import BOT_CONFIG, LOG_LEVEL, QUICK_QUESTIONS, TRANSCRIPT_PATH
from engine import IntentEngine
from transcript import TranscriptLogger, new_session_id

logger = logging.getLogger(__name__)


class CollegeBot:
    def __init__(
        self,
        engine: Optional[IntentEngine] = None,
        transcript: Optional[TranscriptLogger] = None,
    ):
        self.engine = engine or IntentEngine()
        self.composer = ResponseComposer(self.engine.knowledge)
        self.transcript = transcript or TranscriptLogger(TRANSCRIPT_PATH or None)
        self.session_id = new_session_id()
        self.history: List[Dict] = []

    def reset(self):
        """New conversation: fresh session id and empty history"""
        self.session_id = new_session_id()
        self.history = []

    def start(self) -> List[BotMessage]:
        """Opening messages of a conversation"""
        welcome = BotMessage(BOT_CONFIG["welcome_message"])
        self._record("bot", welcome.text)
        return [welcome, BotMessage("", quick_questions=True)]

    def process(self, user_message: str) -> Dict:
        """Handle one visitor message"""
        if not user_message or not user_message.strip():
            return {
                "messages": [],
                "kind": None,
                "matched": False,
                "session_id": self.session_id,
            }

        self._record("user", user_message)
        logger.debug("Session %s: %r", self.session_id, user_message)

        # Resolution first; delays are up to whoever displays the messages
        resolution = self.engine.resolve(user_message)
        messages = self.composer.compose(resolution)

        for message in messages:
            self._record("bot", message.text)

        self.history.append({
            "user": user_message,
            "bot": [m.text for m in messages if m.text],
            "kind": resolution.kind.value,
        })

        return {
            "messages": messages,
            "kind": resolution.kind.value,
            "matched": resolution.matched,
            "session_id": self.session_id,
        }

    def _record(self, sender: str, text: str):
        if text:
            self.transcript.log(self.session_id, sender, text)


def show_messages(console: Console, messages: List[BotMessage], typing_delay: float):
    """Print bot messages with the simulated typing pauses"""
    if typing_delay:
        time.sleep(typing_delay)
    for message in messages:
        if typing_delay and message.delay:
            time.sleep(message.delay)
        if message.quick_questions:
            console.print("[dim]Try: " + " | ".join(QUICK_QUESTIONS) + "[/dim]")
        elif message.text:
            console.print(f"[bold green]Bot:[/bold green] {escape(message.text)}", highlight=False)


def run_interactive(bot: CollegeBot, typing_delay: float = 0.0):
    """Interactive mode"""
    console = Console()
    console.rule("KNS College Bot")
    console.print("Commands: /reset /status /quit\n")

    show_messages(console, bot.start(), 0.0)

    while True:
        try:
            user_input = console.input("[bold cyan]You:[/bold cyan] ").strip()

            if not user_input:
                continue

            if user_input == "/quit":
                break

            if user_input == "/reset":
                bot.reset()
                console.print("[dim]\\[Conversation reset][/dim]\n")
                show_messages(console, bot.start(), 0.0)
                continue

            if user_input == "/status":
                console.print(f"\nSession: {bot.session_id}")
                console.print(f"Turns: {len(bot.history)}")
                if bot.transcript.enabled:
                    saved = bot.transcript.read_session(bot.session_id)
                    console.print(f"Transcript: {len(saved)} messages in {bot.transcript.path}")
                console.print()
                continue

            result = bot.process(user_input)
            show_messages(console, result["messages"], typing_delay)
            console.print(f"  [dim]\\[{result['kind']}][/dim]\n")

        except (KeyboardInterrupt, EOFError):
            console.print("\n\nBye!")
            break


def build_parser():
    parser = argparse.ArgumentParser(description="KNS College FAQ bot (terminal chat)")
    parser.add_argument(
        "--transcript", "-t",
        default=TRANSCRIPT_PATH,
        help="JSON Lines file to append the conversation to"
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Print answers immediately, without the typing pause"
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        type=str.upper,
        help="Logging level (default: %(default)s)"
    )
    return parser


def main():
    args = build_parser().parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    bot = CollegeBot(transcript=TranscriptLogger(args.transcript or None))
    run_interactive(bot, typing_delay=0.0 if args.no_delay else BOT_CONFIG["typing_delay"])


if __name__ == "__main__":
    main()
