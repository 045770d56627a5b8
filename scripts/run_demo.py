"""
Quick demo script: run the Mirae reflection chat API locally.

Usage:
    python scripts/run_demo.py

Without OPENAI_API_KEY every reply comes from the scripted fallback.
"""

import uvicorn


def main():
    print("=" * 60)
    print("  Mirae: Course Reflection Chat")
    print("=" * 60)
    print()
    print("Starting server at http://localhost:8000")
    print("Chat endpoint: POST /api/skill-translation/chat")
    print("Health check:  GET  /api/skill-translation/chat")
    print()
    print("API docs: http://localhost:8000/docs")
    print("Press Ctrl+C to stop.")
    print()

    uvicorn.run(
        "mirae.api.app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
