"""Tests for the command line entry point and batch driver."""

from pathlib import Path

import pytest

from ts_api_md.run_update import class_names_to_write
from ts_api_md.write_api_docs import main

SOURCE = """
/** Base docs. */
declare abstract class Base<T> {
    /** Number of values. */
    get size(): number;
    clear(): void;
}
/** LIFO. */
declare class Stack<T> extends Base<T> {
    /** Create a stack. */
    constructor();
    /** Add a value. */
    push(val: T): number;
}
/** FIFO. */
declare class Queue<T> extends Base<T> {
    constructor();
    /** Add a value. */
    enqueue(val: T): number;
}
"""

DOCUMENT = (
    "# API\n"
    "<!-- START CLASS API: Stack -->\n<!-- END CLASS API: Stack -->\n"
    "<!-- START CLASS API: Queue -->\n<!-- END CLASS API: Queue -->\n"
)


@pytest.fixture
def project(tmp_path: Path) -> tuple[Path, Path]:
    """Write a declaration file and a document with markers."""
    source = tmp_path / "index.d.ts"
    source.write_text(SOURCE, encoding="utf-8")
    document = tmp_path / "README.md"
    document.write_text(DOCUMENT, encoding="utf-8")
    return source, document


def _no_config(tmp_path: Path) -> list[str]:
    return ["--config", str(tmp_path / "none.yml")]


def test_main_writes_named_classes(
    tmp_path: Path, project: tuple[Path, Path], capsys: pytest.CaptureFixture[str]
) -> None:
    """Named classes are written and reported."""
    source, document = project
    code = main([str(source), str(document), "Stack", *_no_config(tmp_path)])

    assert code == 0
    text = document.read_text(encoding="utf-8")
    assert "### Stack<T>\nLIFO.\n" in text
    assert "- `constructor();`: Create a stack.\n" in text
    assert "- `get size(): number;`: Number of values.\n" in text
    assert "### Queue<T>" not in text
    assert "Wrote 1/1 class sections" in capsys.readouterr().out


def test_main_all_discovers_markers(tmp_path: Path, project: tuple[Path, Path]) -> None:
    """--all writes every class that has markers."""
    source, document = project
    code = main([str(source), str(document), "--all", *_no_config(tmp_path)])

    assert code == 0
    text = document.read_text(encoding="utf-8")
    assert "### Stack<T>" in text
    assert "### Queue<T>\nFIFO.\n#### Constructor\n- `constructor();`: \n" in text


def test_main_reports_missing_markers(
    tmp_path: Path, project: tuple[Path, Path], capsys: pytest.CaptureFixture[str]
) -> None:
    """Missing markers give exit code 1 but the batch continues."""
    source, document = project
    code = main(
        [str(source), str(document), "Base", "Stack", *_no_config(tmp_path)]
    )

    assert code == 1
    assert "### Stack<T>" in document.read_text(encoding="utf-8")
    out = capsys.readouterr().out
    assert "Wrote 1/2 class sections" in out
    assert "Markers not found for: Base" in out


def test_main_missing_class_exits(tmp_path: Path, project: tuple[Path, Path]) -> None:
    """Unknown class names abort with a message."""
    source, document = project
    with pytest.raises(SystemExit) as excinfo:
        main([str(source), str(document), "Heap", *_no_config(tmp_path)])
    assert "Heap" in str(excinfo.value.code)
    assert document.read_text(encoding="utf-8") == DOCUMENT


def test_main_missing_source_exits(tmp_path: Path) -> None:
    """A missing source file aborts before any work."""
    document = tmp_path / "README.md"
    document.write_text(DOCUMENT, encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "nope.d.ts"), str(document), *_no_config(tmp_path)])
    assert "File not found" in str(excinfo.value.code)


def test_main_uses_config(tmp_path: Path, project: tuple[Path, Path]) -> None:
    """Source, document and classes can come from the config file."""
    source, document = project
    config = tmp_path / "ts_api_md.yml"
    config.write_text(
        f"source: {source}\ndocument: {document}\nclasses:\n  - Queue\n",
        encoding="utf-8",
    )
    assert main(["--config", str(config)]) == 0
    text = document.read_text(encoding="utf-8")
    assert "### Queue<T>" in text
    assert "### Stack<T>" not in text


def test_main_dry_run(tmp_path: Path, project: tuple[Path, Path]) -> None:
    """A dry run leaves the document unchanged."""
    source, document = project
    code = main(
        [str(source), str(document), "--all", "--dry-run", *_no_config(tmp_path)]
    )
    assert code == 0
    assert document.read_text(encoding="utf-8") == DOCUMENT


def test_class_names_to_write(tmp_path: Path) -> None:
    """Configured names come first, discovered ones are appended once."""
    document = tmp_path / "README.md"
    document.write_text(DOCUMENT, encoding="utf-8")
    config = {"classes": ["Queue"], "discover_classes": True}
    assert class_names_to_write(config, document) == ["Queue", "Stack"]
    assert class_names_to_write({"classes": ["Queue"]}, document) == ["Queue"]


def test_main_checks_classes_before_writing(
    tmp_path: Path, project: tuple[Path, Path]
) -> None:
    """Unknown discovered classes abort before any section is written."""
    source, document = project
    text = DOCUMENT + "<!-- START CLASS API: Heap -->\n<!-- END CLASS API: Heap -->\n"
    document.write_text(text, encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main([str(source), str(document), "--all", *_no_config(tmp_path)])

    assert "Heap" in str(excinfo.value.code)
    assert document.read_text(encoding="utf-8") == text
