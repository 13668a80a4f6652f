from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, RedirectResponse

router = APIRouter(tags=["pages"], include_in_schema=False)


HOME_PAGE = """<!DOCTYPE html>
<html>
<head>
  <title>Random Word API</title>
  <style>
    body { font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }
    h1 { color: #333; }
    .endpoint { margin: 20px 0; padding: 15px; border: 1px solid #ddd; border-radius: 5px; }
    .example { background: #f5f5f5; padding: 10px; border-radius: 3px; font-family: monospace; }
  </style>
</head>
<body>
  <h1>Random Word API</h1>
  <p>Random words in several languages. Each client may call <code>/word</code>
  or <code>/all</code> once every few seconds.</p>

  <div class="endpoint">
    <h2>/word</h2>
    <p>Random words, with optional parameters:</p>
    <ul>
      <li><code>number</code>: how many words, 1 to 100 (default 1)</li>
      <li><code>length</code>: exact word length (default any)</li>
      <li><code>lang</code>: language code (default en)</li>
      <li><code>diff</code>: difficulty level 1 to 5 (default any)</li>
    </ul>
    <div class="example">
      <a href="/word?number=3&amp;length=5&amp;lang=en">/word?number=3&amp;length=5&amp;lang=en</a>
    </div>
  </div>

  <div class="endpoint">
    <h2>/all</h2>
    <p>Every word in the given language.</p>
    <div class="example"><a href="/all?lang=en">/all?lang=en</a></div>
  </div>

  <div class="endpoint">
    <h2>/languages</h2>
    <p>Language codes that are currently available.</p>
    <div class="example"><a href="/languages">/languages</a></div>
  </div>
</body>
</html>
"""


@router.get("/")
def index() -> RedirectResponse:
    return RedirectResponse(url="/home", status_code=302)


@router.get("/home", response_class=HTMLResponse)
def home() -> str:
    return HOME_PAGE
