from .core import run_case, run_batch, summarize
from .io import write_csv, write_manifest, export_result

__all__ = ["run_case", "run_batch", "summarize", "write_csv", "write_manifest", "export_result"]
