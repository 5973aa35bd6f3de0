#!/usr/bin/env python3
"""
Resumo das submissoes gravadas no diretorio de dados.

Uso:
  python scripts/project_report.py [--data-dir data/projects] [--json]
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from intake.core.config import get_settings
from intake.domain.stats import count_by_type
from intake.repositories.json_storage import SubmissionRepository


def build_report(repo: SubmissionRepository) -> dict:
    names, records = repo.scan()
    return {
        "directory": str(repo.directory),
        "total": len(names),
        "latest": names[-1] if names else None,
        "byType": count_by_type(records),
    }


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Resumo das submissoes de projetos")
    ap.add_argument("--data-dir", help="Diretorio das submissoes (default: DATA_DIR)")
    ap.add_argument("--json", action="store_true", help="Saida em JSON")
    args = ap.parse_args(argv)

    directory = Path(args.data_dir) if args.data_dir else get_settings().data_dir
    if not directory.is_dir():
        raise SystemExit(f"Diretorio '{directory}' nao existe")

    report = build_report(SubmissionRepository(directory))
    if args.json:
        print(json.dumps(report, ensure_ascii=False, indent=2))
        return 0
    print(f"Diretorio: {report['directory']}")
    print(f"  Total: {report['total']}")
    print(f"  Mais recente: {report['latest'] or '-'}")
    for kind, count in sorted(report["byType"].items()):
        print(f"  {kind}: {count}")
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
