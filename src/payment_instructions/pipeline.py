from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console

from .logging_setup import configure_logging
from .processor import process_instruction
from .settings import ProcessorSettings


STATUS_STYLES = {
    "successful": "bold green",
    "pending": "bold yellow",
    "failed": "bold red",
}


def _read_body(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.exists():
        raise SystemExit(f"No existe el archivo: {path}")
    return path.read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Procesador de instrucciones de pago")
    parser.add_argument("file", help="Ruta al JSON del request ({instruction, accounts}) o '-' para stdin")
    parser.add_argument("--out", default="", help="Ruta de salida JSON (opcional)")
    parser.add_argument("--current-date", default=None, help="Fecha de referencia YYYY-MM-DD")
    parser.add_argument("--verbose", action="store_true", help="Logs de debug")
    parser.add_argument("--log-json", action="store_true", help="Logs en JSON")
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, log_json=args.log_json)
    console = Console(stderr=True)

    raw = _read_body(args.file)
    try:
        body = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"JSON inválido en {args.file}: {exc}")

    try:
        settings = ProcessorSettings(current_date=args.current_date) if args.current_date else ProcessorSettings()
    except ValidationError:
        raise SystemExit(f"Fecha de referencia inválida: {args.current_date}")

    result = process_instruction(body, settings)
    payload = result.model_dump()

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        console.print(f"OK -> {out_path}", style="bold green")
    else:
        print(json.dumps(payload, ensure_ascii=False, indent=2))

    console.print(
        f"{result.status} [{result.status_code}] {result.status_reason}",
        style=STATUS_STYLES[result.status],
        markup=False,
    )
    return 1 if result.status == "failed" else 0


if __name__ == "__main__":
    raise SystemExit(main())
