from patternplay.demos import main

main()
