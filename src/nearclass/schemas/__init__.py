"""
Schema definitions using Pandera for tabular training data.

Training tables are validated at the ingestion boundary before they are
turned into Datasets.
"""

from nearclass.schemas.training import DEFAULT_LABEL_COLUMN, build_training_schema

__all__ = ["DEFAULT_LABEL_COLUMN", "build_training_schema"]
