# sessh services: external programs
