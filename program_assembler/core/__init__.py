"""Core assembly and intermediate representation modules.

WHY: The core package is the stable heart of the assembler: the IR
dataclasses, the splice engine, and the builder values a front end uses
to produce its hand-off. Adapters, emitters, the CLI and the HTTP API
all depend on it; it depends on none of them.

HOW: ir.py defines the data structures, assembler.py merges them,
builder.py gives in-process front ends an explicit literal pool and
instruction stream instead of global tables.

RULES:
- IR dataclasses are the contract between stages, change with care
- Assembly logic inspects sequence shape only, never line content
- No I/O anywhere in this package
"""
