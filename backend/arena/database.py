from databases import Database

from arena.config import config

database = Database(config.pg_dsn)
