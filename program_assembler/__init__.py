"""Program assembler: backend merge stage for a small compiler.

WHY: A syntax-directed front end produces two ordered outputs: the
instruction stream, and the string-literal declarations it discovered
along the way. Neither is a complete program on its own. This package
splices the literal pool into the instruction stream's header and hands
the merged program to an output sink.

HOW: Three-stage pipeline: hand-off (front-end adapters), assemble
(core engine), emit (pluggable emitters). Each stage is independently
testable, and the CLI and HTTP API are thin wrappers around them.

RULES:
- All emitters consume the same MergedProgram
- The engine checks sequence shape, never line content
- TranslationUnit is the stable contract between front end and engine
"""

__version__ = "0.1.0"
