"""HTML for the vote service form."""

import html as html_mod
from collections.abc import Sequence


def display_label(option: str) -> str:
    """Capitalise the first letter for display, leaving the rest untouched."""
    return option[:1].upper() + option[1:]


def _option_block(index: int, option: str) -> str:
    field_id = f"option_{chr(ord('a') + index)}"
    value = html_mod.escape(option, quote=True)
    label = html_mod.escape(display_label(option))
    return f"""
    <div class="option">
      <input type="radio" id="{field_id}" name="option" value="{value}" required>
      <label for="{field_id}">{label}</label>
      <div class="checkmark"></div>
    </div>"""


def render_vote_page(options: Sequence[str], success: bool = False) -> str:
    """Voting form for the configured options, with an optional success banner."""
    banner = '<div class="success">Vote registered successfully</div>' if success else ""
    blocks = "".join(_option_block(i, option) for i, option in enumerate(options))
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width,initial-scale=1">
<title>Voting System</title>
<style>
  * {{ margin:0; padding:0; box-sizing:border-box; }}
  body {{
    font-family:'Segoe UI',Tahoma,Geneva,Verdana,sans-serif;
    background:linear-gradient(135deg,#667eea 0%,#764ba2 100%);
    min-height:100vh; display:flex; align-items:center; justify-content:center;
    padding:20px;
  }}
  .container {{
    background:white; padding:40px; border-radius:20px;
    box-shadow:0 20px 60px rgba(0,0,0,0.3); max-width:500px; width:100%;
  }}
  h1 {{ text-align:center; color:#333; margin-bottom:30px; font-size:2em; }}
  .options {{ display:flex; gap:15px; margin-bottom:20px; }}
  .option {{
    flex:1; background:#f8f9fa; border:3px solid #e9ecef; border-radius:15px;
    padding:30px 20px; cursor:pointer; transition:all 0.3s ease; text-align:center;
  }}
  .option:hover {{
    transform:translateY(-5px); box-shadow:0 10px 25px rgba(0,0,0,0.1);
    border-color:#667eea;
  }}
  .option input[type="radio"] {{ display:none; }}
  .option input[type="radio"]:checked + label {{ color:#667eea; font-weight:bold; }}
  .option input[type="radio"]:checked ~ .checkmark {{
    background:#667eea; border-color:#667eea;
  }}
  .option label {{
    font-size:1.5em; cursor:pointer; display:block; margin-bottom:15px;
    color:#495057; transition:color 0.3s ease;
  }}
  .checkmark {{
    width:30px; height:30px; border:3px solid #dee2e6; border-radius:50%;
    margin:0 auto; transition:all 0.3s ease;
  }}
  button {{
    width:100%; padding:15px; color:white; border:none; border-radius:10px;
    background:linear-gradient(135deg,#667eea 0%,#764ba2 100%);
    font-size:1.2em; font-weight:bold; cursor:pointer; transition:transform 0.2s ease;
  }}
  button:hover {{ transform:scale(1.02); }}
  button:active {{ transform:scale(0.98); }}
  .success {{
    background:#d4edda; color:#155724; padding:15px; border-radius:10px;
    margin-bottom:20px; text-align:center; font-weight:bold;
  }}
</style>
</head>
<body>
<div class="container">
  <h1>Vote Now</h1>
  {banner}
  <form method="POST" action="/vote">
    <div class="options">{blocks}
    </div>
    <button type="submit">Submit Vote</button>
  </form>
</div>
<script>
  document.querySelectorAll('.option').forEach(option => {{
    option.addEventListener('click', () => {{
      option.querySelector('input[type="radio"]').checked = true;
    }});
  }});
</script>
</body>
</html>"""
