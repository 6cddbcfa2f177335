APP_ORG = "MarkdownEditor"
APP_NAME = "Markdown Editor"

_VARS_LIGHT = "--bg:#ffffff; --fg:#111; --muted:#555; --code:#f4f6f8; --border:#ddd; --link:#0b6bfd;"
_VARS_DARK = "--bg:#0f1115; --fg:#e7e9ee; --muted:#a0a4ae; --code:#1a1d24; --border:#2a2f3a; --link:#7aa2ff;"

CSS_BASE = """
html,body { background:var(--bg); color:var(--fg); }
body { font-family: -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; margin: 1.25rem; line-height: 1.55; }
h1,h2,h3,h4,h5 { margin-top: 1.2em; }
pre { padding:.75rem; overflow:auto; border-radius:8px; background:var(--code); }
code { background:var(--code); padding:.15rem .3rem; border-radius:6px; }
blockquote { border-left:4px solid var(--border); margin:1em 0; padding:.25em .75em; color:var(--muted); }
table { border-collapse: collapse; }
th, td { border:1px solid var(--border); padding:.4rem .6rem; }
a { color:var(--link); text-decoration:none; } a:hover { text-decoration:underline; }
del { color:var(--muted); }
hr { border:none; border-top:1px solid var(--border); margin:1.5rem 0; }
ul,ol { padding-left:1.5rem; }
li.task-list-item { list-style-type:none; }
"""

# Keyed by Theme.value
CSS_THEMES = {
    "light": f":root {{ {_VARS_LIGHT} }}\n",
    "dark": f":root {{ {_VARS_DARK} }}\n",
    "system": (
        f":root {{ {_VARS_LIGHT} }}\n"
        f"@media (prefers-color-scheme: dark) {{\n  :root {{ {_VARS_DARK} }}\n}}\n"
    ),
}

HTML_TEMPLATE = """<!doctype html>
<html>
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1.0"/>
<style>{css}</style>
</head>
<body>
{body}
</body>
</html>
"""

SAMPLE_DOCUMENT = """# Welcome to Markdown Editor

Start typing in the editor on the left and see the preview on the right.

## Features

- **Live Preview**: See your changes instantly
- **Export as Markdown**: Save your raw markdown text
- **Modern Design**: Clean and intuitive interface
- **Auto-save**: Your content is automatically saved between sessions

## Formatting Examples

### Lists

- Item 1
- Item 2
    - Nested item

### Code

```python
def hello():
    print("Hello, world!")
```

### Tables

| Header 1 | Header 2 |
| -------- | -------- |
| Cell 1   | Cell 2   |
| Cell 3   | Cell 4   |

### Links

[Visit GitHub](https://github.com)
"""

SETTINGS_DOCUMENT = "editor/markdown-content"
SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_SPLITTER = "window/splitter"
SETTINGS_THEME = "window/theme"
