# Reptile management feature.
