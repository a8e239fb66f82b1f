"""
NFL wins pool: season standings and weekly game grids for a team-ownership pool.
"""
