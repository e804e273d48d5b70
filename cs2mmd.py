#!/usr/bin/env python3
"""
C# / XAML to Mermaid class diagram

Scans a directory tree for .cs and .xaml files and writes <root>/uml.mmd.

Usage:
    python cs2mmd.py path/to/solution
    python cs2mmd.py path/to/solution --namespaces
    python cs2mmd.py path/to/solution --profile team.yaml --verbose

Relationship rules:
    class Foo : Bar          → Foo --|> Bar   (inheritance)
    class Foo : IBar         → Foo ..|> IBar  (realization, I + upper-case)
    private Widget part;     → Foo "1" --* "1" Widget   (Widget declared in tree)
    private List<Widget> ws; → Foo "1" --o "*" Widget   (generic argument declared)
    private int count;       → no edge (type not declared in tree)
"""

import sys

from app.cli import main


if __name__ == "__main__":
    sys.exit(main())
