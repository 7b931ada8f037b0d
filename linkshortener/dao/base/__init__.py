from linkshortener.dao.base.link_table_base_dao import LinkTableBaseDAO


__all__ = [
    'LinkTableBaseDAO',
]
