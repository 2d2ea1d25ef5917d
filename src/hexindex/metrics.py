"""
Prometheus metrics for monitoring cell index usage.
"""
from prometheus_client import Counter, Histogram

# Call metrics
encode_requests_total = Counter(
    'hexindex_encode_total',
    'Total number of lat/lon to cell conversions',
    ['status']
)

decode_requests_total = Counter(
    'hexindex_decode_total',
    'Total number of cell to lat/lon or bounds conversions',
    ['operation', 'status']
)

# Latency metrics
operation_duration_seconds = Histogram(
    'hexindex_operation_duration_seconds',
    'Conversion latency in seconds',
    ['operation']
)

# Grid metrics
pentagon_cells_total = Counter(
    'hexindex_pentagon_cells_total',
    'Conversions that landed in one of the 12 pentagon base cells',
    ['operation']
)
