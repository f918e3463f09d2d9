"""Top-level package for the receipt points service.

The service accepts retail receipts over HTTP, validates them, scores
them with a fixed set of point rules and keeps the score in memory
under a freshly minted identifier. Clients look the score up later
using that identifier.

To run the API locally you can execute:

```bash
python -m receipt_points
```

or serve the application object directly:

```bash
uvicorn receipt_points.api.main:app --reload
```

The listening port is taken from the ``PORT`` environment variable and
defaults to ``8080``. Other values can be overridden through the
environment or a ``.env`` file at the project root.
"""

__version__ = "1.0.0"

__all__: list[str] = ["__version__"]
