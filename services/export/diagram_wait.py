"""
Diagram Rendering Wait Protocol
===============================

Mermaid diagrams are expanded to SVG by JavaScript inside the capture page,
which shares no memory with this process. The two sides talk through one
global flag:

    window.mermaidReady === undefined   still working
    window.mermaidReady === true        all diagrams rendered
    window.mermaidReady === false       library missing or render failed

build_bootstrap_script() produces the page side, injected by the document
wrapper. wait_for_diagrams() is the capture side: it polls the flag and the
resulting SVG through Playwright. Every wait is bounded and a failure only
costs the diagrams, never the export.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from dataclasses import dataclass
import asyncio
import json
import logging

logger = logging.getLogger(__name__)

READY_FLAG = "mermaidReady"
DIAGRAM_SELECTOR = ".mermaid"

# Terminal state of the page-side protocol
FLAG_SETTLED_JS = f"() => typeof window.{READY_FLAG} === 'boolean'"
READ_FLAG_JS = f"() => window.{READY_FLAG}"
ALL_DIAGRAMS_RENDERED_JS = """
() => {
    const diagrams = document.querySelectorAll('%s');
    for (const diagram of diagrams) {
        if (!diagram.querySelector('svg')) {
            return false;
        }
    }
    return true;
}
""" % DIAGRAM_SELECTOR


@dataclass(frozen=True)
class DiagramWaitSettings:
    """Time bounds for the capture-side wait (milliseconds)."""
    library_timeout_ms: int = 20000
    render_timeout_ms: int = 30000
    poll_interval_ms: int = 500
    settle_ms: int = 500

    @classmethod
    def from_config(cls, config) -> "DiagramWaitSettings":
        return cls(
            library_timeout_ms=config.MERMAID_LIBRARY_TIMEOUT_MS,
            render_timeout_ms=config.MERMAID_RENDER_TIMEOUT_MS,
            poll_interval_ms=config.MERMAID_POLL_INTERVAL_MS,
        )


def build_bootstrap_script(theme: str = "default", poll_interval_ms: int = 100, max_attempts: int = 50) -> str:
    """
    Build the inline page script that renders diagrams and sets the flag.

    Awaiting-library: poll window.mermaid every poll_interval_ms, at most
    max_attempts times, then fail. Initializing: configure the theme with
    auto-start off and run over the diagram containers. Rendered or Failed:
    set window.mermaidReady accordingly.
    """
    return """
(function () {
    var attempts = 0;
    function fail(reason, error) {
        console.error('[Diagrams] ' + reason, error || '');
        window.%(flag)s = false;
    }
    function render() {
        try {
            window.mermaid.initialize({ theme: %(theme)s, startOnLoad: false });
            Promise.resolve(window.mermaid.run({ querySelector: %(selector)s }))
                .then(function () { window.%(flag)s = true; })
                .catch(function (error) { fail('Mermaid render failed', error); });
        } catch (error) {
            fail('Mermaid initialization failed', error);
        }
    }
    function awaitLibrary() {
        if (typeof window.mermaid !== 'undefined') {
            render();
            return;
        }
        attempts += 1;
        if (attempts >= %(max_attempts)d) {
            fail('Mermaid library not available after ' + attempts + ' attempts');
            return;
        }
        setTimeout(awaitLibrary, %(interval)d);
    }
    if (document.readyState === 'loading') {
        document.addEventListener('DOMContentLoaded', awaitLibrary);
    } else {
        awaitLibrary();
    }
})();
""".strip() % {
        'flag': READY_FLAG,
        'theme': json.dumps(theme),
        'selector': json.dumps(DIAGRAM_SELECTOR),
        'max_attempts': max_attempts,
        'interval': poll_interval_ms,
    }


async def wait_for_diagrams(page, settings: DiagramWaitSettings) -> bool:
    """
    Wait for the page-side protocol to finish rendering diagrams.

    Args:
        page: Playwright page holding the wrapped document
        settings: Wait bounds

    Returns:
        True if every diagram container holds an SVG, False otherwise.
        Never raises: timeouts and page errors are logged as warnings.
    """
    try:
        await page.wait_for_function(FLAG_SETTLED_JS, timeout=settings.library_timeout_ms)
        ready = await page.evaluate(READ_FLAG_JS)
        if not ready:
            logger.warning("[ExportPDF] Diagram rendering failed in page, exporting without diagrams")
            return False

        await page.wait_for_function(
            ALL_DIAGRAMS_RENDERED_JS,
            timeout=settings.render_timeout_ms,
            polling=settings.poll_interval_ms
        )
        # Give Mermaid a moment to finish layout after the SVG appears
        await asyncio.sleep(settings.settle_ms / 1000)
        logger.debug("[ExportPDF] All diagrams rendered")
        return True
    except Exception as e:  # pylint: disable=broad-except
        logger.warning("[ExportPDF] Diagram rendering wait timed out or failed: %s", e)
        return False
