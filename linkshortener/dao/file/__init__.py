from linkshortener.dao.file.link_table_file_dao import LinkTableFileDAO


__all__ = [
    'LinkTableFileDAO',
]
