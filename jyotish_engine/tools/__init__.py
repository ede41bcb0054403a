# Jyotish Engine - Entry points
