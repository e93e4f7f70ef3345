from prometheus_client import Counter, Histogram

# Histogram for API call latency (seconds)
dexcom_api_call_latency_seconds = Histogram(
    'dexcom_api_call_latency_seconds',
    'Latency of Dexcom API calls in seconds',
    ['method', 'endpoint']
)

# Counter for total API calls
# status: success (2xx), error (non-2xx or transport failure)
dexcom_api_call_total = Counter(
    'dexcom_api_call_total',
    'Total Dexcom API calls',
    ['method', 'endpoint', 'status']
)

__all__ = [
    'dexcom_api_call_latency_seconds',
    'dexcom_api_call_total',
]
