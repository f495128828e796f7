"""
Pacioli Kernel - Journal Entry Core

A pure double-entry bookkeeping core with:
- Value-typed accounts
- Side-typed debit and credit lines
- Validated, immutable journal entries
- Exact decimal zero-sum balancing
"""

__version__ = "0.1.0"
