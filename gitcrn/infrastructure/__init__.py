"""Infrastructure layer (HTTP and process access)"""
