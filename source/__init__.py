"""
Input side of the converter: JSON documents from files, stdin and URLs.
"""
