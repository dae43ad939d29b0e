# Todo feature.
