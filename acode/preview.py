"""
ACode Preview Builder

Assembles a single HTML document from the workspace for the preview
pane. This is static concatenation: nothing is bundled or transpiled.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional

from acode.core.config_loader import get_config
from acode.filesystem import NodeStore


def build_preview(store: NodeStore, fallback_document: Optional[str] = None) -> str:
    """
    Build the preview document.

    The first ``.html`` file (in creation order) is the page; if there is
    none, or it is empty, the fallback document is used. Every ``.css``
    file is inlined as a ``<style>`` block before the first ``</head>``
    and every ``.js``/``.ts`` file as a ``<script>`` block before the
    first ``</body>``. Missing markers mean nothing is inserted.

    Args:
        store: Workspace to read files from
        fallback_document: Page used when no HTML file exists;
            defaults to the configured one

    Returns:
        The assembled HTML
    """
    if fallback_document is None:
        fallback_document = get_config().preview.fallback_document

    files = store.files()
    html_file = next((f for f in files if f.name.endswith('.html')), None)
    document = html_file.content if html_file is not None and html_file.content else fallback_document

    styles = '\n'.join(
        f"<style>{f.content}</style>" for f in files if f.name.endswith('.css')
    )
    scripts = '\n'.join(
        f"<script>{f.content}</script>" for f in files if f.name.endswith(('.js', '.ts'))
    )

    document = document.replace('</head>', f"{styles}</head>", 1)
    return document.replace('</body>', f"{scripts}</body>", 1)
