#!/usr/bin/env python3
"""Example: a short multi-turn conversation with an attached image and PDF.

Every prompt becomes one user turn. File paths and URLs in the text are
attached automatically; ones that can't be read are sent as plain text.
"""

import base64
import json
import os
import tempfile
from pathlib import Path

# Check for API key
if not os.getenv("OPENAI_API_KEY"):
    print("Please set OPENAI_API_KEY environment variable")
    exit(1)

from chatbatch import ConnectorConfig, run
from chatbatch.utils import set_log_level


# 1x1 PNG
PIXEL_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


def main():
    print("chatbatch conversation example")
    print("=" * 50)
    
    set_log_level("INFO")
    
    with tempfile.TemporaryDirectory() as temp_dir:
        image_path = Path(temp_dir) / "pixel.png"
        image_path.write_bytes(PIXEL_PNG)
        
        prompts = [
            f"What colour is the image at {image_path}?",
            "Summarize https://www.w3.org/WAI/ER/tests/xhtml/testfiles/resources/pdf/dummy.pdf in one sentence.",
            "Now compare both answers in one line. Also look at /does/not/exist.png.",
        ]
        
        result = run(
            "gpt-4o-mini",
            prompts,
            properties={"prompt": "Answer briefly.", "temperature": 0.2},
            settings={"API_KEY": os.environ["OPENAI_API_KEY"]},
            config=ConnectorConfig(fetch_timeout=30.0)
        )
    
    print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    main()
