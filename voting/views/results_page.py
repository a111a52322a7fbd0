"""HTML for the results service view."""

import html as html_mod

from voting.services.results import OptionTally, Tally, format_percentage

REFRESH_INTERVAL_SECONDS = 5


def _vote_label(count: int) -> str:
    return f"{count} vote" if count == 1 else f"{count} votes"


def _result_item(item: OptionTally) -> str:
    return f"""
    <div class="result-item">
      <div class="result-header">
        <div class="option-name">{html_mod.escape(item.option)}</div>
        <div class="vote-count">{_vote_label(item.count)}</div>
      </div>
      <div class="bar-container">
        <div class="bar" style="width: {item.bar_width:g}%">
          <span class="percentage">{format_percentage(item.percentage, 1)}%</span>
        </div>
      </div>
    </div>"""


_EMPTY_STATE = """
    <div class="empty-state">
      <div class="empty-state-icon">-</div>
      <div class="empty-state-text">No votes registered yet</div>
    </div>"""


def render_results_page(tally: Tally, deleted: bool = False) -> str:
    """Results page that reloads itself every REFRESH_INTERVAL_SECONDS."""
    banner = (
        '<div class="success-message">All votes deleted successfully</div>' if deleted else ""
    )
    items = _EMPTY_STATE if tally.is_empty else "".join(_result_item(t) for t in tally.options)
    refresh_ms = REFRESH_INTERVAL_SECONDS * 1000
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width,initial-scale=1">
<title>Voting Results</title>
<style>
  * {{ margin:0; padding:0; box-sizing:border-box; }}
  body {{
    font-family:'Segoe UI',Tahoma,Geneva,Verdana,sans-serif;
    background:linear-gradient(135deg,#667eea 0%,#764ba2 100%);
    min-height:100vh; padding:40px 20px;
  }}
  .container {{
    max-width:800px; margin:0 auto; background:white; padding:40px;
    border-radius:20px; box-shadow:0 20px 60px rgba(0,0,0,0.3);
  }}
  h1 {{ text-align:center; color:#333; margin-bottom:10px; font-size:2.5em; }}
  .total {{ text-align:center; color:#666; margin-bottom:40px; font-size:1.2em; }}
  .results {{ margin-bottom:30px; }}
  .result-item {{
    margin-bottom:30px; padding:20px; background:#f8f9fa; border-radius:15px;
    transition:transform 0.3s ease;
  }}
  .result-item:hover {{ transform:translateX(5px); }}
  .result-header {{
    display:flex; justify-content:space-between; align-items:center; margin-bottom:15px;
  }}
  .option-name {{
    font-size:1.5em; font-weight:bold; color:#333; text-transform:capitalize;
  }}
  .vote-count {{ font-size:1.8em; font-weight:bold; color:#667eea; }}
  .bar-container {{
    width:100%; height:40px; background:#e9ecef; border-radius:20px;
    overflow:hidden; position:relative;
  }}
  .bar {{
    height:100%; background:linear-gradient(90deg,#667eea 0%,#764ba2 100%);
    border-radius:20px; transition:width 1s ease; display:flex;
    align-items:center; justify-content:flex-end; padding-right:15px;
  }}
  .percentage {{ color:white; font-weight:bold; font-size:1.1em; }}
  .actions {{ display:flex; gap:15px; margin-top:30px; }}
  button {{
    flex:1; padding:15px; border:none; border-radius:10px; font-size:1.1em;
    font-weight:bold; cursor:pointer; transition:all 0.3s ease;
  }}
  .refresh-btn {{
    background:linear-gradient(135deg,#667eea 0%,#764ba2 100%); color:white;
  }}
  .refresh-btn:hover {{ transform:scale(1.02); }}
  .delete-btn {{ background:#dc3545; color:white; }}
  .delete-btn:hover {{ background:#c82333; transform:scale(1.02); }}
  .empty-state {{ text-align:center; padding:60px 20px; color:#666; }}
  .empty-state-icon {{ font-size:4em; margin-bottom:20px; }}
  .empty-state-text {{ font-size:1.3em; }}
  .success-message {{
    background:#d4edda; color:#155724; padding:15px; border-radius:10px;
    margin-bottom:20px; text-align:center; font-weight:bold;
  }}
</style>
</head>
<body>
<div class="container">
  <h1>Voting Results</h1>
  <div class="total">Total votes: <strong>{tally.total}</strong></div>
  {banner}
  <div class="results">{items}
  </div>
  <div class="actions">
    <button class="refresh-btn" onclick="location.reload()">Refresh</button>
    <button class="delete-btn"
      onclick="if (confirm('Are you sure you want to delete all votes?')) {{ document.getElementById('deleteForm').submit(); }}">
      Delete All
    </button>
  </div>
  <form id="deleteForm" method="POST" action="/delete-all" style="display: none;"></form>
</div>
<script>
  setTimeout(() => location.reload(), {refresh_ms});
</script>
</body>
</html>"""
