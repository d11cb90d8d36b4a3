"""
Terminal entrypoint for the summarization client.

Interface responsibilities:
- Accept text from the command line, stdin, or an interactive prompt.
- Forward it to `textsummarizer.llm.service.summarize`.
- Print the summary, or the failure message to stderr.

Request lifecycle (interactive):
1. Read one line of text.
2. Handle local control commands (`exit`/`quit`).
3. Summarize and render the outcome.

Input validation behavior:
- Empty interactive input is ignored and does not call the service.
- One-shot mode forwards the text as-is; blank text yields `InvalidInput`.

Error handling strategy:
- Failures are printed with their kind; one-shot mode exits with status 1.
- EOF and keyboard interrupts end the interactive loop without a traceback.
"""

from dotenv import load_dotenv

load_dotenv()

import argparse
import asyncio
import logging
import os
import sys

from textsummarizer.core.outcome_types import SummarizationOutcome
from textsummarizer.llm.provider_config import SummarizerConfig
from textsummarizer.llm.service import summarize


# =========================================================
# UTF-8 SAFE STDOUT
# =========================================================

if hasattr(sys.stdout, "reconfigure"):
    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="ignore")
    except Exception:
        pass


def render(outcome: SummarizationOutcome) -> int:
    """Print `outcome` and return the matching exit code."""
    if outcome.ok:
        print(outcome.summary_text)
        return 0
    print(f"[{outcome.kind.value}] {outcome.message}", file=sys.stderr)
    return 1


def run_interactive(config: SummarizerConfig) -> None:
    """Prompt for text until `exit`, EOF, or interrupt."""
    print("Text Summarizer started. (Type 'exit' to quit)")
    print(f"Mode: {config.mode.value}  Endpoint: {config.endpoint()}\n")
    print("-" * 60)

    while True:
        try:
            text = input("Text: ").strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break

        if not text:
            continue

        if text.lower() in ("exit", "quit"):
            print("Shutting down.")
            break

        print("\nSummarizing...\n")
        render(asyncio.run(summarize(text, config)))
        print("\n" + "-" * 60 + "\n")


def main(argv=None) -> int:
    """
    CLI entrypoint.

    Modes:
    - positional `text` -> one-shot summary.
    - `-` or piped stdin -> one-shot summary of stdin.
    - no input on a TTY -> interactive loop.
    """
    parser = argparse.ArgumentParser(description="Summarize text via a hosted inference endpoint")
    parser.add_argument("text", nargs="?", help="Text to summarize ('-' reads stdin)")
    parser.add_argument("--mode", default=None, help="development | production")
    args = parser.parse_args(argv)

    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING").upper())

    try:
        config = SummarizerConfig.from_env()
        if args.mode:
            config = config.with_mode(args.mode)
    except ValueError as exc:
        parser.error(str(exc))

    if args.text == "-" or (args.text is None and not sys.stdin.isatty()):
        return render(asyncio.run(summarize(sys.stdin.read(), config)))

    if args.text is not None:
        return render(asyncio.run(summarize(args.text, config)))

    run_interactive(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
