"""Storm data loading and decoding. The session cache lives in storm_analytics.data.store."""
from .loader import discover_storm_files, read_storm_csv, load_storm_data, prepare_storm_data
from .schemas import ImpactSpec, HEALTH_SPEC, ECONOMIC_SPEC
from .normalize import select_columns, decode_magnitude, decode_magnitudes, decode_damage, MissingColumnsError
