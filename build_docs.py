"""Build docs/index.html for GitHub Pages (PyScript / Pyodide).

Extracts the generator core from passgen/__init__.py via the ast module,
wraps it in a PyScript-powered HTML page, and writes to docs/.

Usage:
    python build_docs.py
"""

import ast
from pathlib import Path

ROOT = Path(__file__).parent
SRC = ROOT / "passgen" / "__init__.py"
OUT = ROOT / "docs" / "index.html"

PYSCRIPT_VERSION = "2024.9.2"

# Top-level names copied out of the core module, in dependency order.
CORE_NAMES = [
    "logger",
    "UPPER_SET",
    "LOWER_SET",
    "DIGIT_SET",
    "SYMBOL_SET",
    "CharacterClass",
    "Configuration",
    "DEFAULT_CONFIG",
    "GenerationError",
    "NoClassSelected",
    "InvalidLength",
    "_coerce_length",
    "_system_random",
    "generate",
    "MAX_SCORE",
    "StrengthLabel",
    "ColorTier",
    "_LABELS",
    "_COLORS",
    "StrengthScore",
    "score",
    "estimate_entropy",
]


# ── AST extraction ────────────────────────────────────────────────────────


def _extract(source: str, tree: ast.Module, name: str) -> str:
    """Return the source text of a top-level assignment, class or function."""
    for node in ast.iter_child_nodes(tree):
        if isinstance(node, (ast.FunctionDef, ast.ClassDef)) and node.name == name:
            # Include decorators such as @dataclass.
            start = min([d.lineno for d in node.decorator_list] + [node.lineno])
            lines = source.splitlines()[start - 1 : node.end_lineno]
            return "\n".join(lines)
        if isinstance(node, ast.Assign):
            for target in node.targets:
                if isinstance(target, ast.Name) and target.id == name:
                    return ast.get_source_segment(source, node)
    raise ValueError(f"{name!r} not found in source")


# ── Python code that runs inside PyScript ─────────────────────────────────

_PY_IMPORTS = """\
import asyncio
import enum
import logging
import math
import operator
import secrets
from dataclasses import dataclass

from pyscript import when, document
from js import navigator
"""

_PY_BROWSER = r'''
# ── DOM helpers ──

COPY_ACK_SECONDS = 1.5


def read_config():
    return Configuration(
        length=int(document.querySelector("#lengthSlider").value),
        upper=document.querySelector("#optUpper").checked,
        lower=document.querySelector("#optLower").checked,
        digits=document.querySelector("#optDigits").checked,
        symbols=document.querySelector("#optSymbols").checked,
    )


def update_strength(event=None):
    config = read_config()
    report = score(config)

    document.querySelector("#lengthValue").textContent = str(config.length)
    bar = document.querySelector("#strengthBar")
    bar.style.width = f"{report.percent:.0f}%"
    bar.style.background = report.color.value
    document.querySelector("#strengthText").textContent = report.label.value
    document.querySelector("#entropyText").textContent = (
        f"{estimate_entropy(config)} bits"
    )

    hint = document.querySelector("#noClassHint")
    hint.style.display = "block" if not config.classes else "none"


# ── Event handlers ──

@when("input", "#lengthSlider, .opt")
def on_config_change(event):
    update_strength()


@when("click", "#generateBtn")
def on_generate(event):
    out = document.querySelector("#generatedPassword")
    err = document.querySelector("#errorText")
    copy_btn = document.querySelector("#copyBtn")
    try:
        pwd = generate(read_config())
    except GenerationError as exc:
        out.textContent = "Generate a password..."
        out.classList.add("empty")
        err.textContent = str(exc)
        copy_btn.disabled = True
        return

    err.textContent = ""
    out.textContent = pwd
    out.classList.remove("empty")
    copy_btn.disabled = False
    copy_btn.textContent = "COPY"


@when("click", "#copyBtn")
async def on_copy(event):
    out = document.querySelector("#generatedPassword")
    err = document.querySelector("#errorText")
    if out.classList.contains("empty") or err.textContent:
        return
    btn = event.target
    await navigator.clipboard.writeText(out.textContent)
    btn.textContent = "COPIED!"
    await asyncio.sleep(COPY_ACK_SECONDS)
    btn.textContent = "COPY"


# ── Ready ──
document.querySelector("#loading-overlay").style.display = "none"
update_strength()
'''


# ── HTML template ─────────────────────────────────────────────────────────
# Uses __PYSCRIPT_VERSION__ and __PYSCRIPT_CODE__ as placeholders
# (no f-strings or .format to avoid escaping CSS/JS braces).

HTML_TEMPLATE = r'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Password Generator</title>
    <link rel="stylesheet" href="https://pyscript.net/releases/__PYSCRIPT_VERSION__/core.css">
    <script type="module" src="https://pyscript.net/releases/__PYSCRIPT_VERSION__/core.js"></script>
    <style>
        * { box-sizing: border-box; margin: 0; padding: 0; }

        body {
            min-height: 100vh;
            display: flex;
            align-items: center;
            justify-content: center;
            background: #111827;
            color: #f9fafb;
            font-family: 'Inter', -apple-system, sans-serif;
        }

        /* ── Loading overlay ── */
        #loading-overlay {
            position: fixed;
            inset: 0;
            z-index: 9999;
            background: #111827;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 0.75rem;
            letter-spacing: 3px;
            text-transform: uppercase;
            color: #9ca3af;
        }

        .panel {
            width: min(560px, 92vw);
            padding: 1.5rem;
            background: #1f2937;
            border-radius: 16px;
            box-shadow: 0 20px 40px rgba(0, 0, 0, 0.5);
        }

        .output {
            display: flex;
            gap: 0.75rem;
            align-items: center;
            background: #111827;
            border-radius: 12px;
            padding: 1rem;
        }
        #generatedPassword {
            flex: 1;
            font-family: monospace;
            font-size: 1.1rem;
            overflow: hidden;
            text-overflow: ellipsis;
            white-space: nowrap;
        }
        #generatedPassword.empty { color: #9ca3af; }

        button {
            border: none;
            border-radius: 8px;
            padding: 0.5rem 1rem;
            font-weight: 600;
            color: #fff;
            cursor: pointer;
        }
        #copyBtn { background: #3b82f6; }
        #copyBtn:disabled { background: #4b5563; cursor: not-allowed; }
        #generateBtn { background: #10b981; margin-top: 1.5rem; }

        #errorText { color: #f87171; font-size: 0.85rem; margin-top: 0.5rem; }
        #noClassHint { color: #f87171; font-size: 0.75rem; display: none; }

        .controls {
            display: grid;
            grid-template-columns: 1fr 1fr;
            gap: 1rem;
            margin-top: 1.5rem;
        }
        .controls label { display: flex; gap: 0.5rem; align-items: center; }
        #lengthSlider { width: 100%; accent-color: #34d399; }

        .meter {
            height: 8px;
            background: #374151;
            border-radius: 999px;
            overflow: hidden;
            margin-top: 0.5rem;
        }
        #strengthBar { height: 100%; width: 0; transition: all 0.3s; }
        .strength-row {
            display: flex;
            justify-content: space-between;
            margin-top: 1.5rem;
            font-size: 0.85rem;
        }
    </style>
</head>
<body>
    <div id="loading-overlay">Loading Python runtime...</div>

    <div class="panel">
        <div class="output">
            <div id="generatedPassword" class="empty">Generate a password...</div>
            <button id="copyBtn" disabled aria-label="Copy password">COPY</button>
        </div>
        <p id="errorText"></p>

        <div class="controls">
            <div>
                <label for="lengthSlider">Length: <strong id="lengthValue">12</strong></label>
                <input id="lengthSlider" type="range" min="6" max="32" value="12"
                       aria-label="Password length">
            </div>
            <div>
                <label><input id="optUpper" class="opt" type="checkbox" checked> Include uppercase</label>
                <label><input id="optLower" class="opt" type="checkbox" checked> Include lowercase</label>
                <label><input id="optDigits" class="opt" type="checkbox" checked> Include numbers</label>
                <label><input id="optSymbols" class="opt" type="checkbox" checked> Include symbols</label>
                <p id="noClassHint">At least one option must be selected.</p>
            </div>
        </div>

        <div class="strength-row">
            <span>Strength &middot; <span id="entropyText"></span></span>
            <strong id="strengthText"></strong>
        </div>
        <div class="meter"><div id="strengthBar"></div></div>

        <button id="generateBtn">GENERATE</button>
    </div>

    <!-- Python logic via PyScript -->
    <script type="py">
__PYSCRIPT_CODE__
    </script>

</body>
</html>
'''


# ── Build ──────────────────────────────────────────────────────────────────


def build_core(source: str) -> str:
    """Return the core definitions of *source* as standalone Python."""
    tree = ast.parse(source)
    return "\n\n\n".join(_extract(source, tree, name) for name in CORE_NAMES)


def build() -> None:
    source = SRC.read_text(encoding="utf-8")

    py_code = (
        _PY_IMPORTS
        + "\n# ── Core logic (extracted from passgen/__init__.py) ──\n\n"
        + build_core(source) + "\n"
        + _PY_BROWSER
    )

    html = (
        HTML_TEMPLATE
        .replace("__PYSCRIPT_VERSION__", PYSCRIPT_VERSION)
        .replace("__PYSCRIPT_CODE__", py_code)
    )

    OUT.parent.mkdir(exist_ok=True)
    OUT.write_text(html, encoding="utf-8")
    print(f"Built {OUT}  ({len(html):,} bytes)")


if __name__ == "__main__":
    build()
