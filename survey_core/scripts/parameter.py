# Fixed policy constants shared by the sampling and geofence computations

# Z-scores per confidence level (percent)
z_scores = {
    90: 1.645,
    95: 1.96,
    99: 2.576,
}

# Accepted input ranges
margin_error_range = (1.0, 10.0)  # percent
expected_proportion_range = (0.01, 0.99)

# Finite population correction
fpc_max_population = 10000
fpc_min_population = 10

# Minimum interviews for a stratum quota to be considered reliable
min_quota_per_stratum = 30

# Interviews per researcher per day
workload_optimal_limit = 15
workload_intense_limit = 25

# Geodesy
earth_radius_m = 6371000
latitude_range = (-90.0, 90.0)
longitude_range = (-180.0, 180.0)
default_geofence_radius_m = 100
