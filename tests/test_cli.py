import asyncio

from bs4 import BeautifulSoup

import render_decks


def test_renders_every_deck(deck_tree, tmp_path):
    output = tmp_path / "out"
    ok = asyncio.run(render_decks.main([
        "--source", str(deck_tree), "--mode", "model", "--output", str(output), "--log-level", "WARNING",
    ]))
    assert ok
    assert sorted(p.name for p in output.iterdir()) == ["Study.html", "Study_01.html", "Study_02.html"]
    page = BeautifulSoup((output / "Study_02.html").read_text(encoding="utf-8"), "html.parser")
    assert page.find(id="deck-title").get_text() == "02"
    assert len(page.find_all(class_="card-front")) == 2


def test_selected_deck_failure_reported(deck_tree, tmp_path):
    (deck_tree / "01" / "deck.json").unlink()
    output = tmp_path / "out"
    ok = asyncio.run(render_decks.main([
        "--source", str(deck_tree), "--deck", "01", "--output", str(output), "--log-level", "WARNING",
    ]))
    assert not ok
    assert "Error loading deck" in (output / "Study_01.html").read_text(encoding="utf-8")


def test_unknown_deck(deck_tree, tmp_path):
    ok = asyncio.run(render_decks.main([
        "--source", str(deck_tree), "--deck", "nope", "--output", str(tmp_path), "--log-level", "WARNING",
    ]))
    assert not ok


def test_missing_manifest(tmp_path):
    ok = asyncio.run(render_decks.main(["--source", str(tmp_path), "--output", str(tmp_path / "o")]))
    assert not ok
