"""API routers for the Bargain Finder API"""
