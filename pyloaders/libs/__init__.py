"""Libraries layer: pluggable loader implementations and the machinery around them."""
