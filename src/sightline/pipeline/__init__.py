"""Pipeline orchestration — Source → Tables → Artifacts.

Both pipelines follow the same flow:
1. Fetch raw records from the external source
2. Normalize into tables and derive render columns
3. Export the tables to the Parquet cache
4. Render the artifacts

Components:
- Orchestrator: Main coordinator
- Fetcher: Sources → raw records
- Processor: Raw records → normalized tables
"""

from sightline.pipeline.orchestrator import Orchestrator

__all__ = ["Orchestrator"]
