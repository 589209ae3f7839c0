import argparse
import logging
from pathlib import Path

from src.mtg.document import build_rules_document
from src.mtg.errors import EffectiveDateNotFoundError
from src.mtg.models.rules import RulesDocument

logging.basicConfig(level=logging.INFO)


def load_rules_text(rules_path: str) -> str:
    """Read a Comprehensive Rules .txt download without translating line endings."""
    path = Path(rules_path)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")
    # newline="" keeps the bare carriage returns the parser splits on
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        return f.read()


def dump_rules(rules_path: str) -> RulesDocument:
    """
    Parse a rules text file into a RulesDocument.

    Args:
        rules_path: Path to the Comprehensive Rules .txt file

    Returns:
        The parsed document

    Raises:
        EffectiveDateNotFoundError: If the file has no effective date sentence
    """
    document = build_rules_document(load_rules_text(rules_path))
    if document is None:
        raise EffectiveDateNotFoundError()
    return document


def dump_rules_json(rules_path: str, output_path: str | None = None, indent: int | None = 2) -> None:
    """Write the parsed document as JSON to output_path, or print it when no path is given."""
    document = dump_rules(rules_path)
    body = document.to_json(indent=indent)

    if output_path is None:
        print(body)
        return

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding="utf-8") as f:
        f.write(body)

    print(f"Rules written to {output}")
    print(f"Total categories: {len(document.rules)}")
    print(f"Total glossary terms: {len(document.glossary)}")


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(description='Dump Comprehensive Rules text as structured JSON')
    parser.add_argument('rules_path', help='Path to the Comprehensive Rules .txt file')
    parser.add_argument('--output', '-o', help='Where to write the JSON (prints to stdout when omitted)')
    parser.add_argument('--indent', type=int, default=2, help='JSON indentation (default: 2)')

    args = parser.parse_args()
    dump_rules_json(args.rules_path, output_path=args.output, indent=args.indent)


if __name__ == '__main__':
    main()
