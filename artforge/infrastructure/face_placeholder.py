"""Face Placeholder: offline stand-in for the face-image collaborator.

Invariants:
    - Never performs network IO
    - Output depends only on the first 20 characters of the seed (XML-escaped)
"""

from xml.sax.saxutils import escape

_EXCERPT_LENGTH = 20


class PlaceholderFaceProvider:
    """Renders a titled card in place of a fetched face image."""

    def render(self, seed: str) -> str:
        excerpt = escape(seed[:_EXCERPT_LENGTH])
        return f"""<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 400 400">
  <rect width="400" height="400" fill="#1a1a2e"/>
  <text x="200" y="200" text-anchor="middle" fill="#f7931a" font-size="24">Bitcoin Face</text>
  <text x="200" y="240" text-anchor="middle" fill="#888" font-size="14">{excerpt}...</text>
</svg>"""
