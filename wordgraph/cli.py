#!/usr/bin/env python
"""
Command-line interface over a word graph built from a text file.

Usage:
    wordgraph corpus.txt show
    wordgraph corpus.txt bridge the studies
    wordgraph corpus.txt generate "the studies dataset"
    wordgraph corpus.txt path the dataset
    wordgraph corpus.txt pagerank scientist
    wordgraph corpus.txt walk -o random_walk.txt
"""
import argparse
import logging
import sys
import threading
from pathlib import Path

from wordgraph.api import WordGraph
from wordgraph.exceptions import RenderError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordgraph",
        description="Query the word-adjacency graph of a text file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("corpus", type=Path, help="Text file the graph is built from")
    parser.add_argument("--encoding", default="utf-8", help="Corpus file encoding")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random choices")

    sub = parser.add_subparsers(dest="command", required=True, help="Operation")

    sub.add_parser("show", help="List every edge as 'source -> target: weight'")

    dot = sub.add_parser("dot", help="Export the graph in Graphviz DOT format")
    dot.add_argument("-o", "--output", type=Path, help="Write DOT to this file instead of stdout")
    dot.add_argument("--png", type=Path, help="Also render a PNG through the 'dot' executable")

    bridge = sub.add_parser("bridge", help="Bridge words between two words")
    bridge.add_argument("word1")
    bridge.add_argument("word2")

    gen = sub.add_parser("generate", help="Insert bridge words into new text")
    gen.add_argument("text")
    gen.add_argument("--reset-on-punctuation", action="store_true", help="Do not bridge across punctuation")

    path = sub.add_parser("path", help="Shortest path between two words")
    path.add_argument("start")
    path.add_argument("end", nargs="?", help="Omit to list paths to every reachable word")

    pr = sub.add_parser("pagerank", help="PageRank of a word")
    pr.add_argument("word", nargs="?")
    pr.add_argument("--top", type=int, help="Show the N highest ranked words instead")
    pr.add_argument("--damping", type=float, default=WordGraph.DAMPING_FACTOR)
    pr.add_argument("--iterations", type=int, default=WordGraph.PAGERANK_ITERATIONS)

    walk = sub.add_parser("walk", help="Random walk; press Enter to stop early")
    walk.add_argument("-o", "--output", type=Path, default=Path("random_walk.txt"), help="Where to save the walk")
    walk.add_argument("--delay", type=float, default=WordGraph.WALK_DELAY, help="Seconds between steps")

    return parser


def _stop_on_enter(handle):
    # EOF means no terminal to press Enter on; let the walk run to its end
    if sys.stdin.readline():
        handle.stop()


def _run(engine: WordGraph, args) -> int:
    if args.command == "show":
        print(engine.describe())
    elif args.command == "dot":
        if args.output:
            args.output.write_text(engine.to_dot(), encoding="utf-8")
            logger.info("Wrote DOT to %s", args.output)
        else:
            print(engine.to_dot(), end="")
        if args.png:
            engine.render_png(args.png)
    elif args.command == "bridge":
        print(engine.bridge_words(args.word1, args.word2).message())
    elif args.command == "generate":
        print(engine.generate_new_text(args.text, reset_on_punctuation=args.reset_on_punctuation))
    elif args.command == "path":
        if args.end is None:
            results = engine.shortest_paths_from(args.start)
            if not results:
                print(f'No "{args.start.lower()}" in the graph!')
                return 1
            for res in results.values():
                print(f"{res.message()}  ({res.weight})")
            return 0
        res = engine.shortest_path(args.start, args.end)
        print(res.message())
        if not res.found:
            return 1
        print(f"Length: {res.weight}")
    elif args.command == "pagerank":
        if args.top is not None:
            if args.top < 0:
                logger.error("--top must be non-negative")
                return 2
            for row in engine.rank_nodes(n=args.top).to_pylist():
                print(f"{row['rank']:>4}  {row['node']:<20} {row['score']:.6f}")
            return 0
        if not args.word:
            logger.error("Give a word or --top N")
            return 2
        score = engine.page_rank(args.word)
        if score is None:
            print(f'No "{args.word.lower()}" in the graph!')
            return 1
        print(f"PageRank of {args.word.lower()}: {score}")
    elif args.command == "walk":
        if engine.is_empty:
            logger.error("The graph is empty; nothing to walk")
            return 1
        print("Walking... press Enter to stop.")
        handle = engine.start_walk(delay=args.delay)
        threading.Thread(target=_stop_on_enter, args=(handle,), daemon=True).start()
        walk = handle.result()
        print(" ".join(walk))
        engine.save_walk(args.output, walk)
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    engine_kwargs = {"seed": args.seed}
    if args.command == "pagerank":
        engine_kwargs.update(damping=args.damping, iterations=args.iterations)
    try:
        with WordGraph.from_file(args.corpus, encoding=args.encoding, **engine_kwargs) as engine:
            return _run(engine, args)
    except (OSError, ValueError, RenderError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
