#!/usr/bin/env python3
"""Check for banned Python constructions in quotable source.

Banned constructions:

    Construction          Reason                            Use instead
    --------------------  --------------------------------  --------------------------
    import shlex          quotable owns its quoting rules   ShellSingleQuote, shell_join
    import binascii       one hex path for all formatters   HexEncode
    except:               hides sink and byte view errors   except <SpecificError>:
"""

import ast
import os
import sys

BANNED_MODULES = {
    "shlex": "use quotable.core.shell",
    "binascii": "use quotable.core.hexenc",
}


def find_python_files(directory):
    """Find all .py files recursively, sorted."""
    result = []
    for root, _dirs, files in os.walk(directory):
        for f in files:
            if f.endswith(".py"):
                result.append(os.path.join(root, f))
    result.sort()
    return result


def check_source(source, filename="<string>"):
    """Return (lineno, description) for each banned construction in source."""
    tree = ast.parse(source, filename)
    errors = []

    for node in ast.walk(tree):
        lineno = getattr(node, "lineno", 0)

        if isinstance(node, ast.Import):
            for alias in node.names:
                root = alias.name.split(".")[0]
                if root in BANNED_MODULES:
                    errors.append((lineno, f"import {alias.name}: banned, {BANNED_MODULES[root]}"))

        elif isinstance(node, ast.ImportFrom):
            root = (node.module or "").split(".")[0]
            if root in BANNED_MODULES:
                errors.append((lineno, f"from {node.module} import: banned, {BANNED_MODULES[root]}"))

        elif isinstance(node, ast.ExceptHandler) and node.type is None:
            errors.append((lineno, "bare except: banned, name the exception"))

    return errors


def check_file(filepath):
    with open(filepath) as f:
        return check_source(f.read(), filepath)


def main():
    src_dir = sys.argv[1] if len(sys.argv) > 1 else "src"

    if not os.path.isdir(src_dir):
        print(f"Directory not found: {src_dir}")
        sys.exit(1)

    files = find_python_files(src_dir)
    if not files:
        print(f"No Python files found in: {src_dir}")
        sys.exit(1)

    all_errors = []
    for filepath in files:
        try:
            for lineno, description in check_file(filepath):
                all_errors.append((filepath, lineno, description))
        except SyntaxError as e:
            print(f"Syntax error in {filepath}: {e}")
            sys.exit(1)

    if not all_errors:
        sys.exit(0)

    print(f"Found {len(all_errors)} banned construction(s):")
    for filepath, lineno, description in sorted(all_errors):
        print(f"  {filepath}:{lineno}: {description}")
    sys.exit(1)


if __name__ == "__main__":
    main()
