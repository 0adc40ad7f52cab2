# bikeflow/viz/widgets/time_slider.py
from html import escape

import folium

from bikeflow.traffic.time_filter import MINUTES_PER_DAY, NO_FILTER, format_time


def build_time_slider(time_filter: int, *, title: str = "Bikewatching", param: str = "t"):
    """
    Header with the time-of-day slider.

    Dragging only updates the label; releasing the slider reloads the page
    with ?t=<minute>, which recomputes traffic server side.
    """
    label = "" if time_filter == NO_FILTER else format_time(time_filter)
    any_display = "block" if time_filter == NO_FILTER else "none"

    return folium.Element(
        f"""
<style>
#time-header {{
  position: fixed;
  top: 15px;
  right: 15px;
  z-index: 1300;
  background: rgba(255,255,255,0.95);
  padding: 10px 14px;
  border-radius: 8px;
  box-shadow: 0 1px 4px rgba(0,0,0,0.25);
  font-family: sans-serif;
  font-size: 12px;
  min-width: 260px;
}}
#time-header label {{
  display: block;
}}
#time-slider {{
  width: 100%;
}}
#selected-time {{
  display: block;
  font-weight: 600;
}}
#any-time {{
  color: #666;
  font-style: italic;
}}
</style>

<div id="time-header">
  <div style="font-weight:700;">{escape(title)}</div>
  <label>
    Filter by time:
    <input id="time-slider" type="range" min="{NO_FILTER}" max="{MINUTES_PER_DAY - 1}" value="{time_filter}">
    <time id="selected-time">{label}</time>
    <em id="any-time" style="display:{any_display};">(any time)</em>
  </label>
</div>

<script>
function formatSliderTime(minutes) {{
  const date = new Date(0, 0, 0, 0, minutes);
  return date.toLocaleString("en-US", {{ timeStyle: "short" }});
}}

document.addEventListener("DOMContentLoaded", () => {{
  const slider = document.getElementById("time-slider");
  const selected = document.getElementById("selected-time");
  const anyTime = document.getElementById("any-time");
  if (!slider) return;

  slider.addEventListener("input", () => {{
    const t = Number(slider.value);
    if (t === {NO_FILTER}) {{
      selected.textContent = "";
      anyTime.style.display = "block";
    }} else {{
      selected.textContent = formatSliderTime(t);
      anyTime.style.display = "none";
    }}
  }});

  slider.addEventListener("change", () => {{
    const url = new URL(window.location.href);
    url.searchParams.set("{param}", String(slider.value));
    window.location.href = url.toString();
  }});
}});
</script>
"""
    )
