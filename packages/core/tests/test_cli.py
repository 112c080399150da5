"""Tests for the command line interface."""

import json

from cards_core.cli import main
from cards_core.storage import JsonFileCardStore


def test_list_prints_stored_cards(tmp_path, capsys) -> None:
    path = tmp_path / "cards.json"
    JsonFileCardStore(path).add_card("Front", "Back")
    capsys.readouterr()

    assert main(["list", "--store", str(path)]) == 0

    captured = capsys.readouterr()
    rows = json.loads(captured.out)
    assert "Loaded 1 cards" in captured.err
    assert [(r["front"], r["back"]) for r in rows] == [("Front", "Back")]


def test_generate_missing_image(tmp_path) -> None:
    assert main(["generate", str(tmp_path / "missing.jpg")]) == 2


def test_generate_without_configuration(tmp_path, monkeypatch, sample_image) -> None:
    for name in ("CARDS_API_KEY", "CARDS_OCR_URL", "CARDS_GENERATION_URL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    image = tmp_path / "page.png"
    sample_image.save(image)

    assert main(["generate", str(image)]) == 2


def test_configure_logging_moves_package_logs(capsys) -> None:
    from cards_core.utils.logging import configure_logging, get_logger

    logger = get_logger("cards_core.tests.stream")
    try:
        configure_logging("INFO", stream="stderr")
        logger.info("to stderr")
        captured = capsys.readouterr()
        assert "to stderr" in captured.err
        assert "to stderr" not in captured.out
    finally:
        configure_logging(stream="stdout")
