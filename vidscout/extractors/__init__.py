"""Site extractors that turn a page URL into media records."""