from notfound_server.server import main

main()
