"""Web page routes."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, render_template


web_bp = Blueprint("web", __name__)


@web_bp.get("/")
def index():
    return render_template("index.html", locale=current_app.config.get("DRAW_LOCALE", "en"))


@web_bp.get("/favicon.ico")
def favicon() -> Response:
    svg = """<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 64 64'>
    <defs>
        <radialGradient id='g' cx='35%' cy='30%' r='80%'>
            <stop offset='0%' stop-color='#FF6B6B'/>
            <stop offset='50%' stop-color='#E53935'/>
            <stop offset='100%' stop-color='#B71C1C'/>
        </radialGradient>
    </defs>
    <circle cx='32' cy='32' r='28' fill='url(#g)'/>
    <circle cx='32' cy='32' r='13' fill='#fff'/>
    <text x='32' y='38' text-anchor='middle' font-family='system-ui,Segoe UI,Arial' font-size='16' font-weight='800' fill='#B71C1C'>7</text>
</svg>"""

    return Response(svg, mimetype="image/svg+xml")
