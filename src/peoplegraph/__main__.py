"""Run with: python -m peoplegraph [roster.json]"""
from peoplegraph.main import main

main()
