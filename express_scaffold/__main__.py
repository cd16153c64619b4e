from express_scaffold.pipeline import main

main()
