from monitor_service.api.main import main

main()
