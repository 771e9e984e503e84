"""Instance initialization: admin address and deployed version."""
