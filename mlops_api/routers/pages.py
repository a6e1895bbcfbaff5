# mlops_api/routers/pages.py
from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["pages"])

INDEX_HTML = """
<h1>ML Ops Demo API</h1>
<p>Available endpoints:</p>
<ul>
  <li>GET <a href="/api/users">/api/users</a> &ndash; list users</li>
  <li>GET <a href="/api/models">/api/models</a> &ndash; list registered models</li>
  <li>POST /api/models &ndash; register a model (name, version, artifactUrl)</li>
  <li>GET <a href="/api/pipelines">/api/pipelines</a> &ndash; list pipelines</li>
  <li>POST /api/pipelines/run &ndash; trigger a pipeline (pipelineId)</li>
  <li>GET <a href="/dashboard">/dashboard</a> &ndash; dashboard</li>
</ul>
"""

DASHBOARD_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>ML Ops Dashboard</title>
  <style>
    body { font-family: -apple-system, "Segoe UI", Roboto, sans-serif; background: #0f172a; color: #e2e8f0; margin: 0; padding: 2rem; }
    h1 { margin-top: 0; color: #38bdf8; }
    .grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(240px, 1fr)); gap: 1rem; }
    .card { background: #1e293b; border-radius: 8px; padding: 1rem 1.25rem; }
    .card h2 { font-size: 1.1rem; margin: 0 0 .5rem; }
    code { background: #334155; padding: 2px 6px; border-radius: 4px; }
    .get { color: #4ade80; font-weight: bold; }
    .post { color: #facc15; font-weight: bold; }
    a { color: #38bdf8; }
    footer { margin-top: 2rem; font-size: .9rem; color: #94a3b8; }
  </style>
</head>
<body>
  <h1>ML Ops Dashboard</h1>
  <p>In-memory demo service for users, models and pipelines.</p>
  <div class="grid">
    <div class="card">
      <h2>Users</h2>
      <p><span class="get">GET</span> <code>/api/users</code></p>
      <p>Seeded team members and their roles.</p>
    </div>
    <div class="card">
      <h2>Models</h2>
      <p><span class="get">GET</span> <code>/api/models</code></p>
      <p><span class="post">POST</span> <code>/api/models</code></p>
      <p>Register with <code>name</code>, <code>version</code>, <code>artifactUrl</code>.</p>
    </div>
    <div class="card">
      <h2>Pipelines</h2>
      <p><span class="get">GET</span> <code>/api/pipelines</code></p>
      <p><span class="post">POST</span> <code>/api/pipelines/run</code></p>
      <p>Trigger with <code>pipelineId</code>.</p>
    </div>
    <div class="card">
      <h2>Ops</h2>
      <p><span class="get">GET</span> <code>/health</code></p>
      <p>Service status and collection counts.</p>
    </div>
  </div>
  <footer><a href="/">&larr; Back to API index</a></footer>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
def index():
    return HTMLResponse(INDEX_HTML)


@router.get("/dashboard", response_class=HTMLResponse)
def dashboard():
    return HTMLResponse(DASHBOARD_HTML)
