# bluetraffic/viz/maps/error.py
import html


def render_load_error(message: str, title: str | None = None) -> str:
    """
    Page shown instead of the map when station / trip data failed to load.
    """
    heading = html.escape(title or "Bike traffic map")
    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{heading}: data unavailable</title>
<style>
body {{
  font-family: sans-serif;
  margin: 48px auto;
  max-width: 640px;
  color: #333;
}}
.load-error {{
  border-left: 4px solid #d73027;
  background: #fdf0ef;
  padding: 12px 16px;
  border-radius: 4px;
}}
</style>
</head>
<body>
  <h1>{heading}</h1>
  <div class="load-error">
    <b>Could not load bike data.</b>
    <p>{html.escape(message)}</p>
  </div>
</body>
</html>
"""
