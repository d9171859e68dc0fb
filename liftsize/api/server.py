"""
FastAPI server for the elevator sizing estimator.

Provides REST API endpoints and a simple HTML UI.
WARNING: Preliminary advisory estimates only, NOT a structural calculation.
"""

import logging

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from liftsize import __version__
from liftsize.config import DEFAULT_CONSTANTS, ElevatorConstants, get_settings
from liftsize.estimator.pipeline import estimate_request
from liftsize.models.inputs import CalculationRequest
from liftsize.models.outputs import ErrorReport, Report

logger = logging.getLogger(__name__)

settings = get_settings()

# Create FastAPI app
app = FastAPI(
    title=settings.api_title,
    description="""
    Preliminary sizing for residential traction elevators with counterweight.

    **WARNING**: This tool provides rough advisory estimates only.
    Not a structural calculation and not a code compliance check.
    """,
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# HTML UI Template
HTML_UI = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Elevator Sizing Estimator</title>
    <style>
        * { box-sizing: border-box; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            max-width: 1200px;
            margin: 0 auto;
            padding: 20px;
            background: #f5f5f5;
            color: #333;
        }
        h1 { color: #2c3e50; border-bottom: 3px solid #3498db; padding-bottom: 10px; }
        .warning {
            background: #fff3cd;
            border: 1px solid #ffc107;
            padding: 12px;
            border-radius: 4px;
            margin-bottom: 20px;
        }
        .container { display: flex; gap: 20px; flex-wrap: wrap; }
        .input-section, .output-section {
            background: white;
            padding: 20px;
            border-radius: 8px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }
        .input-section { flex: 0 0 280px; }
        .output-section { flex: 1; min-width: 400px; }
        label { display: block; margin-top: 10px; font-size: 13px; color: #666; }
        input {
            width: 100%;
            padding: 8px;
            border: 1px solid #ddd;
            border-radius: 4px;
        }
        button {
            margin-top: 15px;
            padding: 12px 24px;
            font-size: 14px;
            cursor: pointer;
            border: none;
            border-radius: 4px;
            background: #3498db;
            color: white;
        }
        button:hover { background: #2980b9; }
        .warn-item { color: #e67e22; }
        .error-item { color: #e74c3c; }
        pre { white-space: pre-wrap; font-size: 11px; }
    </style>
</head>
<body>
    <h1>Elevator Sizing Estimator</h1>
    <div class="warning">
        <strong>ADVISORY ONLY</strong> - Preliminary sizing for concept iteration.
        Not a structural calculation, not a code compliance check.
    </div>

    <div class="container">
        <div class="input-section">
            <h3>Inputs</h3>
            <label for="stops">Stops</label>
            <input id="stops" type="number" min="2" step="1" value="2">
            <label for="load">Rated load (kg)</label>
            <input id="load" type="number" min="1" step="any" value="400">
            <label for="travel">Travel (m)</label>
            <input id="travel" type="number" min="0.1" step="any" value="4">
            <button onclick="runEstimate()">Estimate</button>
        </div>

        <div class="output-section">
            <h3>Report</h3>
            <div id="messages"></div>
            <pre id="results">Enter inputs and click Estimate.</pre>
        </div>
    </div>

    <script>
        async function runEstimate() {
            const params = new URLSearchParams({
                stops: document.getElementById('stops').value,
                rated_load_kg: document.getElementById('load').value,
                travel_m: document.getElementById('travel').value,
            });
            const messages = document.getElementById('messages');
            const results = document.getElementById('results');
            messages.innerHTML = '';
            results.textContent = 'Estimating...';
            try {
                const response = await fetch('/estimate?' + params.toString());
                const data = await response.json();
                const items = data.ok ? data.warnings : (data.errors || [data.detail]);
                const cls = data.ok ? 'warn-item' : 'error-item';
                messages.innerHTML = (items || [])
                    .map(m => '<p class="' + cls + '">' + m + '</p>')
                    .join('');
                results.textContent = JSON.stringify(data, null, 2);
            } catch (err) {
                results.textContent = 'Error: ' + err;
            }
        }
    </script>
</body>
</html>
"""


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


def _respond(request: CalculationRequest) -> Report | JSONResponse:
    result = estimate_request(request)
    if isinstance(result, ErrorReport):
        logger.info("rejected estimate request: %s", result.errors)
        return JSONResponse(status_code=400, content=result.model_dump(mode="json"))
    return result


@app.get("/", response_class=HTMLResponse)
async def root():
    """Serve the HTML UI."""
    return HTML_UI


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check if the API is running."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/example", response_model=CalculationRequest, tags=["Reference"])
async def get_example():
    """Get an example request."""
    return CalculationRequest(stops=3, rated_load_kg=450.0, travel_m=6.0)


@app.get("/constants", response_model=ElevatorConstants, tags=["Reference"])
async def get_constants():
    """Get the fixed engineering assumptions every estimate uses."""
    return DEFAULT_CONSTANTS


@app.get(
    "/estimate",
    response_model=Report,
    responses={400: {"model": ErrorReport}},
    tags=["Estimates"],
)
async def estimate_get(
    stops: int = Query(default=2, description="Number of stops"),
    rated_load_kg: float = Query(default=400.0, description="Rated load in kg"),
    travel_m: float = Query(default=4.0, description="Total travel in m"),
):
    """
    Run the sizing estimate from query parameters.

    Invalid inputs return 400 with every violated constraint listed.
    """
    return _respond(
        CalculationRequest(stops=stops, rated_load_kg=rated_load_kg, travel_m=travel_m)
    )


@app.post(
    "/estimate",
    response_model=Report,
    responses={400: {"model": ErrorReport}},
    tags=["Estimates"],
)
async def estimate_post(request: CalculationRequest):
    """Run the sizing estimate from a JSON body."""
    return _respond(request)
