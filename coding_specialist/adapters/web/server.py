"""FastAPI application, page, and startup."""

import html
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from coding_specialist.adapters.web import routes
from coding_specialist.adapters.web.routes import api_router
from coding_specialist.config import CONFIG
from coding_specialist.domain.models import ACTIONS

app = FastAPI(title="AI Coding Specialist")
app.include_router(api_router)


class StatusResponse(BaseModel):
    sessionId: str
    processingDelayMs: int
    processing: bool
    lastReportAt: Optional[str]


@app.get("/status", response_model=StatusResponse)
async def status():
    """Server status endpoint"""
    current = routes.dispatcher.current
    return StatusResponse(
        sessionId=CONFIG["session_id"],
        processingDelayMs=CONFIG["processing_delay_ms"],
        processing=routes.dispatcher.is_processing,
        lastReportAt=current.timestamp.isoformat() if current else None,
    )


def _render_buttons() -> str:
    return "\n".join(
        f'          <button onclick="runAction(\'{info.action.value}\')" '
        f'title="{html.escape(info.description)}">{html.escape(info.label)}</button>'
        for info in ACTIONS
    )


@app.get("/", response_class=HTMLResponse)
async def root():
    """Single-page UI"""
    return f"""
    <html>
      <head>
        <title>AI Coding Specialist</title>
        <meta name="description" content="Professional code analysis, generation, and improvement tool">
        <style>
          body {{ font-family: sans-serif; max-width: 1100px; margin: 40px auto; background: #1e1b2e; color: #e5e7eb; }}
          h1 {{ text-align: center; color: #c084fc; }}
          .subtitle {{ text-align: center; color: #d1d5db; }}
          .inputs {{ display: flex; gap: 20px; }}
          .panel {{ flex: 1; background: #2a2540; padding: 20px; border-radius: 8px; margin-top: 20px; }}
          textarea {{ width: 100%; height: 250px; background: #0f172a; color: #f3f4f6; font-family: monospace; border-radius: 6px; padding: 10px; }}
          .actions {{ display: grid; grid-template-columns: repeat(6, 1fr); gap: 10px; margin-top: 20px; }}
          button {{ padding: 14px; font-size: 15px; background: #9333ea; color: white; border: none; border-radius: 6px; cursor: pointer; }}
          button:disabled {{ background: #4b5563; cursor: not-allowed; }}
          pre {{ white-space: pre-wrap; font-family: monospace; background: #0f172a; padding: 20px; border-radius: 6px; }}
          .results-header {{ display: flex; justify-content: space-between; align-items: center; }}
          .hidden {{ display: none; }}
          footer {{ text-align: center; color: #9ca3af; margin-top: 40px; font-size: 14px; }}
        </style>
      </head>
      <body>
        <h1>AI Coding Specialist</h1>
        <p class="subtitle">Professional code analysis, generation, and improvement powered by AI</p>

        <div class="inputs">
          <div class="panel">
            <label for="code">Code Input</label>
            <textarea id="code" placeholder="Paste your code here..."></textarea>
          </div>
          <div class="panel">
            <label for="prompt">Instructions / Requirements</label>
            <textarea id="prompt" placeholder="Describe what you need... (required for Write and Expand actions)"></textarea>
          </div>
        </div>

        <div class="actions">
{_render_buttons()}
        </div>

        <div id="loading" class="panel hidden">
          <p>Processing your request...</p>
        </div>

        <div id="results" class="panel hidden">
          <div class="results-header">
            <h2 id="result-title"></h2>
            <span id="result-time"></span>
          </div>
          <pre id="result-text"></pre>
        </div>

        <div id="info" class="panel">
          <h3>How to Use</h3>
          <ul>
            <li><strong>Analyze:</strong> Get detailed code quality analysis</li>
            <li><strong>Write:</strong> Generate new code from description (use Instructions field)</li>
            <li><strong>Improve:</strong> Enhance code with best practices</li>
            <li><strong>Refactor:</strong> Restructure code for better maintainability</li>
            <li><strong>Debug:</strong> Identify and fix potential issues</li>
            <li><strong>Expand:</strong> Add new features to existing code</li>
          </ul>
        </div>

        <footer>AI-powered code specialist • Analyze • Generate • Improve • Debug</footer>

        <script>
          function setLoading(on) {{
            document.getElementById('loading').classList.toggle('hidden', !on);
            if (on) {{
              document.getElementById('results').classList.add('hidden');
              document.getElementById('info').classList.add('hidden');
            }}
            document.querySelectorAll('.actions button').forEach(b => b.disabled = on);
          }}

          async function runAction(type) {{
            setLoading(true);
            try {{
              const res = await fetch('/api/dispatch', {{
                method: 'POST',
                headers: {{ 'Content-Type': 'application/json' }},
                body: JSON.stringify({{
                  action: type,
                  code: document.getElementById('code').value,
                  prompt: document.getElementById('prompt').value,
                }}),
              }});
              const data = await res.json();
              document.getElementById('result-title').textContent =
                data.type.charAt(0).toUpperCase() + data.type.slice(1) + ' Results';
              document.getElementById('result-time').textContent =
                new Date(data.timestamp).toLocaleTimeString();
              document.getElementById('result-text').textContent = data.result;
              document.getElementById('results').classList.remove('hidden');
            }} finally {{
              setLoading(false);
            }}
          }}
        </script>
      </body>
    </html>
    """


@app.on_event("startup")
async def startup_event():
    print("AI Coding Specialist starting")
    print(f"Session: {CONFIG['session_id']}")
    print(f"Processing delay: {CONFIG['processing_delay_ms']}ms")
    print("Ready!")


def main():
    uvicorn.run(app, host=CONFIG["host"], port=CONFIG["port"], log_level="info")


if __name__ == "__main__":
    main()
