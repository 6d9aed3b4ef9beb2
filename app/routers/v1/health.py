from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

STATUS_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>CollaborIQ Server</title>
    <style>
        body {
            margin: 0;
            font-family: Arial, sans-serif;
            background: linear-gradient(135deg, #0a9396, #94d2bd);
            color: #fefae0;
            display: flex;
            justify-content: center;
            align-items: center;
            height: 100vh;
        }
        .container { text-align: center; }
        h1 { font-size: 3rem; margin-bottom: 10px; }
        p { font-size: 1.5rem; margin-top: 0; }
        .status {
            margin-top: 20px;
            padding: 10px 20px;
            border-radius: 5px;
            background-color: #e9d8a6;
            color: #005f73;
            font-weight: bold;
        }
    </style>
</head>
<body>
    <div class="container">
        <h1>CollaborIQ Server</h1>
        <p>Your server is up and running!</p>
        <div class="status">Server is Running</div>
    </div>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def status_page():
    return STATUS_PAGE


@router.get("/health")
async def health_check():
    return {"status": "ok"}
