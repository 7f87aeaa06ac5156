"""
API Routers - Organized endpoint handlers for the Sociogram API.

Each router handles a specific domain:
- social_graph: Classroom sociogram analysis and reports
"""
