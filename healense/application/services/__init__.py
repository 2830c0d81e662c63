"""Application services: prompt assembly, output sanitizing and response streaming."""
