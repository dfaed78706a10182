"""
================================================================================
Allure Report Utilities
================================================================================

Helpers for enriching Allure reports with attachments and environment data.

Features:
- Text / JSON / PNG attachment helpers
- cURL command generation for request reproduction
- environment.properties writer for the Allure results directory

================================================================================
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import allure
from loguru import logger


MASKED = "***MASKED***"

# Headers whose values never appear in reports
SENSITIVE_HEADERS = {"authorization", "x-api-key", "x-app-auth", "cookie", "set-cookie"}


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    json_str = json.dumps(data, indent=2, default=str, ensure_ascii=False)
    allure.attach(
        json_str,
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_screenshot(screenshot: bytes, name: str = "Screenshot"):
    """
    Attach a PNG screenshot to Allure report.
    """
    allure.attach(
        screenshot,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


def build_curl_command(
    method: str,
    url: str,
    headers: Optional[Mapping[str, str]] = None,
    body: Optional[Any] = None
) -> str:
    """
    Build a copy-paste ready cURL command.

    Sensitive header values are masked.
    """
    cmd_parts = [f"curl -X {method}"]

    for key, value in (headers or {}).items():
        if key.lower() in SENSITIVE_HEADERS:
            value = MASKED
        cmd_parts.append(f"-H '{key}: {value}'")

    if body is not None:
        body_str = json.dumps(body, ensure_ascii=False, default=str) if isinstance(body, (dict, list)) else str(body)
        cmd_parts.append(f"-d '{body_str}'")

    cmd_parts.append(f"'{url}'")

    return " \\\n  ".join(cmd_parts)


def attach_curl_command(
    method: str,
    url: str,
    headers: Optional[Dict[str, str]] = None,
    body: Optional[Any] = None
):
    """
    Attach cURL command for API request reproduction.
    """
    attach_text(build_curl_command(method, url, headers, body), name="cURL Command")


# ================================================================================
# Environment
# ================================================================================

def write_environment_properties(
    results_dir: Union[str, Path],
    properties: Mapping[str, Any],
) -> Optional[Path]:
    """
    Write environment.properties into the Allure results directory.

    Allure shows these key/value pairs in the "Environment" widget.

    Returns:
        Path to the written file, or None when there is nothing to write
    """
    if not properties:
        logger.debug("No Allure environment properties to write")
        return None

    results_path = Path(results_dir)
    results_path.mkdir(parents=True, exist_ok=True)
    output_path = results_path / "environment.properties"

    lines = [f"{key}={value}" for key, value in properties.items()]
    output_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    logger.debug(f"Allure environment written to: {output_path}")
    return output_path


__all__ = [
    "MASKED",
    "SENSITIVE_HEADERS",
    "attach_curl_command",
    "attach_json",
    "attach_screenshot",
    "attach_text",
    "build_curl_command",
    "write_environment_properties",
]
