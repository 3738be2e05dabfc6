# sessh core: host lists, session history and input resolution
