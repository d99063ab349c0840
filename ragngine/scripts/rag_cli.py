#!/usr/bin/env python3
"""
ragngine RAG CLI: split, ingest and ask from the command line.

Usage:
  python -m ragngine.scripts.rag_cli split ./docs/handbook.pdf --chunk-size 400
  python -m ragngine.scripts.rag_cli ingest ./docs/handbook.pdf --table handbook
  python -m ragngine.scripts.rag_cli ask "What is data mining?" --top-k 5

Required env: OPENAI_API_KEY (ingest, ask), DATABASE_URL (neon_pg store)
"""
from __future__ import annotations

import argparse
import asyncio
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from ragngine.clients.embedding import EmbeddingConfig
from ragngine.clients.llm import LLMConfig
from ragngine.config import DEFAULT_TABLE_NAME, Settings, load_settings
from ragngine.core.exceptions import RagngineError
from ragngine.core.logger import LoggerConfig, configure, get_logger
from ragngine.factory import build_engine
from ragngine.rag import DocumentSource, RagQuery, split_document
from ragngine.rag.engine import RagEngine
from ragngine.rag.types import DEFAULT_CHUNK_OVERLAP, DEFAULT_CHUNK_SIZE, DEFAULT_QUERY_TOP_K

# Swappable for tests
_print_fn = print
_default_print_fn = print


def _set_io(print_fn=None) -> None:
    global _print_fn
    if print_fn is not None:
        _print_fn = print_fn


def _reset_io() -> None:
    global _print_fn
    _print_fn = _default_print_fn


def _out(msg: str = "") -> None:
    _print_fn(msg)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ragngine", description="Retrieval-augmented generation over your documents."
    )
    parser.add_argument(
        "--store", default="neon_pg", choices=["neon_pg", "memory"], help="Vector store provider"
    )
    parser.add_argument("--table", default=None, help=f"Table name (default {DEFAULT_TABLE_NAME})")
    parser.add_argument(
        "--embedding-model",
        default="text-embedding-3-small",
        help="text-embedding-3-small or text-embedding-3-large",
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    sub = parser.add_subparsers(dest="command", required=True)

    def _chunk_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--chunk-size", type=int, default=DEFAULT_CHUNK_SIZE)
        p.add_argument("--chunk-overlap", type=int, default=DEFAULT_CHUNK_OVERLAP)
        p.add_argument("--method", default="character", choices=["character", "recursive"])

    split = sub.add_parser("split", help="Split a .txt/.pdf document and print the chunks")
    split.add_argument("document", help="Path or http(s) URL")
    _chunk_args(split)

    ingest = sub.add_parser("ingest", help="Split, embed and store documents")
    ingest.add_argument("documents", nargs="+", help="Paths or http(s) URLs")
    _chunk_args(ingest)

    ask = sub.add_parser("ask", help="Retrieve, rerank and answer a question")
    ask.add_argument("query")
    ask.add_argument("--top-k", type=int, default=DEFAULT_QUERY_TOP_K)
    ask.add_argument("--rerank", default="cosine", choices=["cosine", "dot"])
    ask.add_argument("--llm-model", default="gpt-4o-mini")
    ask.add_argument("--temperature", type=float, default=None)
    ask.add_argument("--max-tokens", type=int, default=None)
    ask.add_argument(
        "--fetch-k", type=int, default=None, help="Candidates fetched before reranking"
    )
    ask.add_argument(
        "--document",
        action="append",
        default=[],
        help="Ingest this document first (repeatable; useful with --store memory)",
    )
    _chunk_args(ask)
    return parser


def _setup_logging(level: Optional[str]) -> None:
    config = LoggerConfig.from_env().with_overrides(level=level.upper() if level else None)
    if config.log_dir:
        try:
            os.makedirs(config.log_dir, exist_ok=True)
        except OSError as e:
            _out(f"  Warning: could not create log dir {config.log_dir} ({e})")
    configure(config)


def _store_config(args: argparse.Namespace) -> Dict[str, Any]:
    return {"table_name": args.table} if args.table else {}


def _source(location: str, args: argparse.Namespace) -> DocumentSource:
    return DocumentSource(
        document_url=location,
        chunk_size=args.chunk_size,
        chunk_overlap=args.chunk_overlap,
        method=args.method,
    )


async def _ingest_all(engine: RagEngine, locations: List[str], args: argparse.Namespace) -> int:
    total = 0
    for location in locations:
        result = await engine.ingest(_source(location, args))
        if result is None:
            _out(f"  Skipped (unsupported type): {location}")
            continue
        total += result.chunk_count
        _out(f"  ✓ {location}: {result.chunk_count} chunks [{result.source_type}]")
    return total


async def cmd_split(args: argparse.Namespace, settings: Settings) -> int:
    chunks = await split_document(_source(args.document, args))
    if chunks is None:
        _out(f"Unsupported document type: {args.document}")
        return 1
    for chunk in chunks:
        preview = chunk.content[:70].replace("\n", " ")
        _out(f"[{chunk.chunk_index}] ({chunk.char_count} chars) {preview}")
    _out(f"{len(chunks)} chunks")
    return 0


async def cmd_ingest(args: argparse.Namespace, settings: Settings) -> int:
    engine = await build_engine(
        settings,
        EmbeddingConfig(model=args.embedding_model),
        store_provider=args.store,
        store_config=_store_config(args),
    )
    async with engine:
        total = await _ingest_all(engine, args.documents, args)
    _out(f"Stored {total} chunks.")
    return 0


async def cmd_ask(args: argparse.Namespace, settings: Settings) -> int:
    llm_config = LLMConfig(
        model=args.llm_model,
        temperature=args.temperature,
        max_tokens=args.max_tokens,
        top_k=args.fetch_k,
    )
    engine = await build_engine(
        settings,
        EmbeddingConfig(model=args.embedding_model),
        llm_config,
        store_provider=args.store,
        store_config=_store_config(args),
    )
    async with engine:
        if args.document:
            await _ingest_all(engine, args.document, args)
        result = await engine.ask(RagQuery(args.query, top_k=args.top_k, rerank=args.rerank))
    _out(result.answer or "")
    _out("")
    _out(f"  Sources ({len(result.documents)}):")
    for doc in result.documents:
        source = doc.metadata.get("source", "?")
        _out(f"   - {Path(str(source)).name} #{doc.metadata.get('chunk_index', '?')}")
    return 0


COMMANDS = {
    "split": cmd_split,
    "ingest": cmd_ingest,
    "ask": cmd_ask,
}


async def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.log_level)
    logger = get_logger(__name__)
    settings = load_settings()
    logger.info("CLI command=%s store=%s settings=%r", args.command, args.store, settings)
    try:
        return await COMMANDS[args.command](args, settings)
    except RagngineError as e:
        logger.error("Command %s failed: %s", args.command, e, extra={"error": e.to_dict()})
        _out(f"Error [{e.code}]: {e}")
        return 1


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
