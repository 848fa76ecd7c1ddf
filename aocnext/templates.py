"""The launch.json written into every day directory."""

import json

WORKSPACE = "${workspaceFolder}"


def render_launch_config(day_dir_name: str) -> str:
    """Debugger config whose only day-specific value is the program path."""
    config = {
        "version": "0.2.0",
        "configurations": [
            {
                "name": "lldb-default",
                "type": "lldb-vscode",
                "request": "launch",
                "program": f"{WORKSPACE}/target/debug/{day_dir_name}",
                "args": [],
                "env": {},
                "cwd": WORKSPACE,
                "stopOnEntry": False,
                "debuggerRoot": WORKSPACE,
            }
        ],
    }
    return json.dumps(config, indent=4) + "\n"
