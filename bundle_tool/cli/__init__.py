"""Command line interface for bundle-tool"""
