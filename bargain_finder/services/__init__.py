"""Services for the Bargain Finder API"""
