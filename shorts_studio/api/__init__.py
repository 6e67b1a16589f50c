"""HTTP API for Shorts Script Studio"""
