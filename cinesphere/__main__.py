from cinesphere.main import main


raise SystemExit(main())
