#!/usr/bin/env python3
"""
Password Block Checker

Reports the largest block of identical adjacent characters in a password
and suggests how far to shorten it.

Usage:
  python main.py [password] [options]

  When the password is omitted, one line is read from stdin (masked when
  stdin is a terminal).

Options:
  --env-file PATH   Path to env defaults file (default: .env)
  --json            Print {"error": ...} or {"run_length": ..., "feedback": ...}
  --log-level NAME  Logging level override

Exit codes:
  0  password accepted, block report on stdout
  1  password rejected, error message on stderr

Env keys in .env:
  CHECKER_MIN_LENGTH, CHECKER_MAX_LENGTH, CHECKER_BLOCK_THRESHOLD,
  CHECKER_MASK_INPUT, CHECKER_LOG_LEVEL, CHECKER_ADAPTER (interactive session only)

Interactive session:
  python -m block_check.gui [--adapter terminal|jsonl]
"""

from __future__ import annotations

from block_check.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
