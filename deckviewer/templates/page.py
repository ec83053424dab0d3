"""Viewer page skeleton, base card CSS and the flip behaviour."""

from html import escape


class PageTemplates:
    """Container for the page shell and the fixed card chrome."""

    HINT_SHOW_ANSWER = "Click to show answer ▾"
    HINT_SHOW_QUESTION = "Click to show question ▴"

    LOADING_HTML = "Loading..."
    EMPTY_HTML = "<p>No notes in this deck.</p>"

    # Applied to every templated card after the model's own CSS
    CARD_BASE_CSS = """
    .card { font-family: arial; font-size: 20px; text-align: center; color: black; background-color: white; }
    hr#answer { border: 0; border-top: 1px dashed #ccc; margin: 15px 0; }
    """

    PAGE_CSS = """
    body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif; margin: 0; padding: 20px; background: #f4f6f9; color: #333; }
    #deck-title { margin: 0 0 10px 0; }
    #controls { margin-bottom: 15px; color: #666; font-size: 0.9em; }
    .card-container { background: #fff; border-radius: 12px; box-shadow: 0 2px 10px rgba(0,0,0,0.05); margin: 0 auto 20px auto; max-width: 800px; overflow: hidden; }
    .card-render { padding: 15px; }
    .card-raw th { text-align: left; width: 150px; padding: 8px; border-bottom: 1px solid #eee; vertical-align: top; }
    .card-raw td { padding: 8px; border-bottom: 1px solid #eee; }
    .card-raw table { width: 100%; border-collapse: collapse; }
    .card-flip-hint { text-align: center; font-size: 0.75em; color: #adb5bd; margin-top: 10px; user-select: none; }
    .card-tags { padding: 8px 15px; border-top: 1px solid #f2f2f2; }
    .tag { display: inline-block; background: #f1f3f5; padding: 2px 8px; border-radius: 10px; margin: 0 2px; font-size: 0.75em; color: #868e96; }
    .error { color: #c0392b; padding: 12px; background: #fdecea; border-radius: 8px; }
    """

    # Browser-side binding of the two-state flip; mirrors render.card_state
    FLIP_JS = """
    document.addEventListener('click', function (e) {
        var card = e.target.closest('.card-render[data-side]');
        if (!card) return;
        var front = card.querySelector('.card-front');
        var back = card.querySelector('.card-back');
        var hint = card.querySelector('.card-flip-hint');
        if (card.dataset.side === 'front') {
            front.style.display = 'none';
            back.style.display = '';
            if (hint) hint.textContent = 'Click to show question ▴';
            card.dataset.side = 'back';
        } else {
            front.style.display = '';
            back.style.display = 'none';
            if (hint) hint.textContent = 'Click to show answer ▾';
            card.dataset.side = 'front';
        }
    });
    """

    PAGE_HTML = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Deck Viewer</title>
<style id="viewer-style"></style>
</head>
<body>
<h1 id="deck-title"></h1>
<div id="controls" style="display:none">Render mode: <span id="render-mode"></span></div>
<div id="cards-container"></div>
<div id="library-scripts"></div>
<div id="deferred-scripts"></div>
<script id="viewer-flip"></script>
</body>
</html>
"""

    @classmethod
    def error_html(cls, error: object) -> str:
        return f'<div class="error">Error loading deck: {escape(str(error))}</div>'

    @classmethod
    def combined_card_html(cls, css: str, front_html: str, back_html: str) -> str:
        """Model stylesheet plus both faces, only the front visible."""
        return (
            f"<style>\n{css}\n{cls.CARD_BASE_CSS}</style>"
            f'<div class="card-face card-front">{front_html}</div>'
            f'<div class="card-face card-back" style="display:none">{back_html}</div>'
        )
