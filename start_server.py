"""
Server start script
"""
import uvicorn
import sys
from pathlib import Path

# Put the project root on the Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from config.settings import settings

if __name__ == "__main__":
    print("=" * 70)
    print(f"Dunder Mifflin Infinity 2.0 server starting on http://{settings.api_host}:{settings.api_port}")
    print("=" * 70)
    try:
        uvicorn.run(
            "src.api.main:app",
            host=settings.api_host,
            port=settings.api_port,
            reload=False,
            log_level=settings.log_level.lower()
        )
    except KeyboardInterrupt:
        print("\nServer stopped")
