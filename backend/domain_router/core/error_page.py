"""Not-Found Page — renders the HTML document returned for every 404 outcome.

Invariants:
    - Every interpolated value is HTML-escaped
    - The host box shows only a pre-sanitized host, else "unknown domain"
    - Support link rendered only when a URL is configured
"""

from html import escape

UNKNOWN_DOMAIN = "unknown domain"

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>404 - Page Not Found</title>
    <style>
        body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
               background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
               color: white; text-align: center; padding: 60px 20px; min-height: 100vh; }}
        .container {{ max-width: 600px; margin: 0 auto; }}
        h1 {{ font-size: 120px; margin: 0; opacity: 0.9; }}
        h2 {{ font-size: 28px; margin: 20px 0; }}
        p {{ font-size: 18px; margin-bottom: 30px; opacity: 0.8; }}
        .btn {{ display: inline-block; background: white; color: #764ba2;
               padding: 12px 30px; border-radius: 50px; text-decoration: none;
               font-weight: bold; margin: 10px; transition: transform 0.3s; }}
        .btn:hover {{ transform: translateY(-3px); }}
        .domain {{ background: rgba(255,255,255,0.1); padding: 10px 20px;
                  border-radius: 10px; margin: 20px 0; font-family: monospace; }}
    </style>
</head>
<body>
    <div class="container">
        <h1>404</h1>
        <h2>{message}</h2>
        <p>The page for this domain could not be found.</p>
        <div class="domain">{host}</div>
        <div>
            <a href="/" class="btn">Back to home</a>{support_link}
        </div>
    </div>
</body>
</html>
"""

_SUPPORT_LINK = '\n            <a href="{url}" class="btn" target="_blank" rel="noopener">Support</a>'


def render_not_found_page(
    message: str, host: str | None = None, support_url: str | None = None,
) -> str:
    support_link = _SUPPORT_LINK.format(url=escape(support_url)) if support_url else ""
    return _PAGE_TEMPLATE.format(
        message=escape(message),
        host=escape(host or UNKNOWN_DOMAIN),
        support_link=support_link,
    )
