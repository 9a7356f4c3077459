#!/usr/bin/env python3
"""
Run the simulation service from anywhere in the project.
Usage: python3 run_backend.py
"""
import os
import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.resolve()
backend_dir = project_root / "backend"

os.chdir(backend_dir)

# tanksim lives at the project root; make it importable for the service process.
env = dict(os.environ)
env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(project_root), env.get("PYTHONPATH")]))

cmd = [
    sys.executable,
    "-m",
    "uvicorn",
    "app.main:app",
    "--host",
    "127.0.0.1",
    "--port",
    "8000",
    "--reload",
]

print(f"Running simulation service from: {backend_dir}")
subprocess.run(cmd, env=env)
