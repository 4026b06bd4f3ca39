"""
cli.py - command line sentence generator
Features:
- Reads one or more text files and trains a MarkovChain on all of them
- Reports chain size and training time on stderr
- Prints a fresh sentence for every Enter press, or --count sentences in batch mode
- Slash commands to inspect the chain (/stats, /links) and reseed (/seed)
- Uses Rich for tables and formatting
"""

import argparse
import random
import sys
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box
from rich.markup import escape

from markov_generator.context.tokenizer import boundary_predicate, split_words
from markov_generator.core.chain import MarkovChain
from markov_generator.core.errors import MarkovError
from markov_generator.core.generator import SentenceGenerator
from markov_generator.utils.config_manager import Config
from markov_generator.utils.logger_utils import Log

# sentences go to stdout, diagnostics to stderr
console = Console()
err_console = Console(stderr=True)

HELP = "Enter: new sentence   /stats   /links <words>   /seed <n>   /help   /quit"


def _non_negative_int(text: str) -> int:
    n = int(text)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="markov-generator",
        description="Train a variable-order Markov chain on text files and generate sentences.",
    )
    p.add_argument("files", nargs="+", help="UTF-8 text files to train on")
    p.add_argument("--config", help="JSON config file (created with defaults if missing)")
    p.add_argument("--depth", type=int, help="longest context length (default 4)")
    p.add_argument("--delimiters", help="sentence ending characters (default '.?!')")
    p.add_argument("--seed", type=int, help="seed for reproducible output")
    p.add_argument("--max-words", type=int, dest="max_words",
                   help="cap generated sentences at this many words")
    p.add_argument("--count", type=_non_negative_int,
                   help="print this many sentences and exit instead of prompting")
    p.add_argument("--log-file", dest="log_file", help="log file path")
    p.add_argument("--verbose", action="store_true", help="echo log lines to stderr")
    return p


def read_sources(paths: List[str]) -> List[str]:
    sources = []
    for path in paths:
        with open(path, "r", encoding="utf-8") as f:
            sources.append(f.read())
    return sources


class CLI:
    """Interactive loop around a trained chain: prompt, generate, inspect."""

    def __init__(self,
                 chain: MarkovChain,
                 generator: SentenceGenerator,
                 rng: random.Random,
                 log: Log,
                 out: Optional[Console] = None):
        self.chain = chain
        self.generator = generator
        self.rng = rng
        self.log = log
        self.out = out or console
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - Enter prints a new sentence
        - /commands inspect the chain
        - EOF or Ctrl-C ends the session
        """
        while self.running:
            try:
                line = self.out.input().strip()
            except (EOFError, KeyboardInterrupt):
                break
            if line.startswith("/"):
                self._handle_command(line)
                continue
            self._print_sentence()
        self.log.info("session ended")

    def print_sentences(self, n: int):
        for _ in range(n):
            self._print_sentence()

    def _print_sentence(self):
        sentence = self.generator.generate(self.rng)
        self.out.print(sentence, markup=False, highlight=False, soft_wrap=True)

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, cmd: str):
        parts = cmd.split()
        name, args = parts[0].lower(), parts[1:]

        if name in ("/q", "/quit", "/exit"):
            self.running = False
            return

        if name == "/help":
            self.out.print(HELP, markup=False)
            return

        if name == "/stats":
            self._show_stats()
            return

        if name == "/links":
            self._show_links(args)
            return

        if name == "/seed":
            self._reseed(args)
            return

        self.out.print(f"[red]Unknown command:[/red] {escape(cmd)}")

    def _show_stats(self):
        stats = self.chain.stats()
        table = Table(title="Chain", box=box.SIMPLE, show_edge=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        for k, v in stats.items():
            table.add_row(k, str(v))
        self.out.print(table)

    def _show_links(self, words: List[str]):
        """Show the successors recorded for a context, best link first."""
        context = split_words(" ".join(words))
        if not context:
            self.out.print("usage: /links <word> [word ...]", markup=False)
            return
        link_set = self.chain.get(context)
        if link_set is None or len(link_set) == 0:
            self.out.print(f"[dim](no links for {escape(' '.join(context))})[/dim]")
            return

        best = link_set.best()
        table = Table(title=" ".join(context), box=box.SIMPLE, show_edge=False)
        table.add_column("Token", style="bold")
        table.add_column("Count", justify="right", style="magenta")
        for link in link_set:
            label = "<end>" if link.token.is_end else link.token.text
            style = "green" if link is best else None
            table.add_row(label, str(link.count), style=style)
        self.out.print(table)

    def _reseed(self, args: List[str]):
        if len(args) != 1:
            self.out.print("usage: /seed <n>", markup=False)
            return
        try:
            seed = int(args[0])
        except ValueError:
            self.out.print(f"[red]bad seed:[/red] {escape(args[0])}")
            return
        self.rng.seed(seed)
        self.log.info(f"reseeded with {seed}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = Config(args.config)
        for key in ("depth", "delimiters", "seed", "max_words"):
            val = getattr(args, key)
            if val is not None:
                cfg.set(key, val, persist=False)
        if args.log_file:
            cfg.set("log_path", args.log_file, persist=False)
    except (OSError, ValueError, KeyError) as e:
        err_console.print(f"[red]Config error:[/red] {escape(str(e))}")
        return 1

    if args.verbose:
        log = Log(cfg.get("log_path"), use_color=sys.stderr.isatty(), stream=sys.stderr)
    else:
        log = Log(cfg.get("log_path"), stream=None)

    try:
        err_console.print("Reading files...")
        sources = read_sources(args.files)

        chain = MarkovChain(depth=cfg.get("depth"))
        sentence_end = boundary_predicate(cfg.get("delimiters"))

        err_console.print("Training chain...")
        with log.time_block("training") as timer:
            for path, source in zip(args.files, sources):
                chain.train_text(source, sentence_end)
                log.info(f"trained {path} ({len(source)} chars)")

        contexts, links = chain.num_contexts_links()
        log.metric("contexts", contexts)
        log.metric("links", links)
        err_console.print(
            f"Trained {contexts} contexts and {links} links in {timer.elapsed:.6f} seconds.",
            markup=False,
        )

        max_words = cfg.get("max_words") or None
        generator = SentenceGenerator(chain, max_words=max_words, logger=log)
        app = CLI(chain, generator, random.Random(cfg.get("seed")), log)

        if args.count is not None:
            app.print_sentences(args.count)
        else:
            err_console.print(Panel(HELP, title="Press enter for a new sentence", border_style="cyan"))
            app.run()
    except (OSError, ValueError, MarkovError) as e:
        log.error(f"{type(e).__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        return 1
    except KeyboardInterrupt:
        log.info("interrupted")
        err_console.print("[yellow]Interrupted.[/yellow]")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
