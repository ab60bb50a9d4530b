#!/usr/bin/env python3
"""
Script for checking the knowledge base by hand.
Run: python scripts/check_knowledge_base.py
     python scripts/check_knowledge_base.py "what are your fees"
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from composer import classify_tip_category
from engine import IntentEngine
from knowledge.base import ProgrammeType
from knowledge.data import KNS_KNOWLEDGE


console = Console()


def show_structure():
    """Catalog and FAQ overview"""
    kb = KNS_KNOWLEDGE
    console.print(f"[bold]{escape(kb.institution_name)}[/bold]")
    for programme_type in ProgrammeType:
        programmes = kb.get_programmes_by_type(programme_type)
        console.print(f"  {programme_type.label}s: {len(programmes)}")
    console.print(f"  FAQ entries: {len(kb.faqs)}\n")


def show_faq(question: str, kb=KNS_KNOWLEDGE):
    faq = kb.get_faq(question)
    if faq is None:
        console.print(f"FAQ '{escape(question)}' not found\n")
        return
    console.print(f"\n=== {escape(faq.question)} ===")
    console.print(f"Keywords: {escape(', '.join(faq.keywords))}")
    console.print(f"\n{escape(faq.answer)}\n")


def show_programme(name: str, kb=KNS_KNOWLEDGE):
    entry = kb.get_programme(name)
    if entry is None:
        console.print(f"Programme '{escape(name)}' not found\n")
        return
    console.print(f"\n=== {escape(entry.name)} ===")
    console.print(f"{entry.type.label}, {escape(entry.duration)}, {escape(entry.mode)}")
    console.print(f"Keywords: {escape(', '.join(entry.keywords))}\n")


def explain(engine: IntentEngine, query: str, top: int = 5):
    """What the engine does with one message, with the top FAQ scores"""
    programme = engine.resolve_programme_intent(query)
    if programme.matched is True:
        console.print(f"[green]Programme:[/green] {escape(programme.entry.name)}")
    elif programme.matched is False:
        console.print(f"[yellow]Programme query not in catalog:[/yellow] {escape(repr(programme.attempted_query))}")
    else:
        console.print("[dim]Not a programme question[/dim]")

    faq = engine.resolve_faq(query)
    if faq is not None:
        category = classify_tip_category(faq)
        console.print(f"[green]FAQ:[/green] {escape(faq.question)} "
                      f"[dim](tip: {category.value if category else '-'})[/dim]")
    else:
        console.print("[red]FAQ: no match[/red]")

    candidates = [c for c in engine.matcher.score_all(query) if c.score > 0]
    candidates.sort(key=lambda c: c.score, reverse=True)

    table = Table(title="FAQ scores")
    table.add_column("Score", justify="right")
    table.add_column("Exact")
    table.add_column("Question")
    for candidate in candidates[:top]:
        table.add_row(str(candidate.score), "yes" if candidate.is_exact_match else "",
                      escape(candidate.entry.question))
    console.print(table)
    console.print()


def run_interactive(engine: IntentEngine):
    """Interactive mode"""
    console.print("Enter a visitor question. Commands: /list, /faq <question>, /programme <name>, /quit\n")

    while True:
        try:
            query = console.input("Question: ").strip()
        except (KeyboardInterrupt, EOFError):
            break

        if not query:
            continue

        if query == "/quit":
            break

        if query == "/list":
            for i, faq in enumerate(KNS_KNOWLEDGE.faqs, 1):
                console.print(f"  {i}. {escape(faq.question)}")
            console.print()
            continue

        if query.startswith("/faq "):
            show_faq(query[len("/faq "):].strip())
            continue

        if query.startswith("/programme "):
            show_programme(query[len("/programme "):].strip())
            continue

        explain(engine, query)


if __name__ == "__main__":
    engine = IntentEngine()
    show_structure()
    if len(sys.argv) > 1:
        explain(engine, " ".join(sys.argv[1:]))
    else:
        run_interactive(engine)
