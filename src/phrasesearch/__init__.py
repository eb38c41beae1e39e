"""phrase-search - grouped phrase search across directory trees"""
