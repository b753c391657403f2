from shortcuts_mcp.server import main

main()
