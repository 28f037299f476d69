"""
HTML share page served to social media crawlers.
"""
import json
from html import escape

from .config import config
from .models import MetaDescriptor

SHARE_PAGE_HTML = '''<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <meta name="description" content="{description}">

  <!-- Open Graph / Facebook -->
  <meta property="og:type" content="{type}">
  <meta property="og:url" content="{url}">
  <meta property="og:title" content="{title}">
  <meta property="og:description" content="{description}">
  <meta property="og:image" content="{image}">
  <meta property="og:image:width" content="{image_width}">
  <meta property="og:image:height" content="{image_height}">

  <!-- Twitter -->
  <meta property="twitter:card" content="summary_large_image">
  <meta property="twitter:url" content="{url}">
  <meta property="twitter:title" content="{title}">
  <meta property="twitter:description" content="{description}">
  <meta property="twitter:image" content="{image}">

  <!-- WhatsApp -->
  <meta property="og:site_name" content="{site_name}">
  <meta property="og:locale" content="{locale}">

  <!-- Redirect to frontend -->
  <meta http-equiv="refresh" content="0; url={url}">
  <script>
    if (typeof window !== 'undefined') {{
      window.location.href = {script_url};
    }}
  </script>
</head>
<body>
  <div style="text-align: center; padding: 50px; font-family: Arial, sans-serif;">
    <h1>{title}</h1>
    <p>{description}</p>
    <p>Redirecting to {site_name}...</p>
    <a href="{url}">Click here if you are not redirected automatically</a>
  </div>
</body>
</html>'''


def script_string(value: str) -> str:
    """Encode a value as a JS string literal that cannot close a script tag."""
    encoded = json.dumps(value)
    return encoded.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


def render_share_page(meta: MetaDescriptor) -> str:
    """Render the crawler-facing page for a vehicle."""
    return SHARE_PAGE_HTML.format(
        title=escape(meta.title),
        description=escape(meta.description),
        image=escape(meta.image),
        url=escape(meta.url),
        type=escape(meta.type),
        image_width=config.OG_IMAGE_WIDTH,
        image_height=config.OG_IMAGE_HEIGHT,
        site_name=escape(config.SITE_NAME),
        locale=escape(config.SITE_LOCALE),
        script_url=script_string(meta.url),
    )
